"""Identifier suppliers.

The test model manager never generates identifiers itself. It receives a
supplier at construction: a callable returning a fresh string on every
call. Uniqueness across the process lifetime is the supplier's
responsibility.
"""

from collections.abc import Callable
from itertools import count
from uuid import uuid4

#: Capability producing a fresh identifier on each call.
type IdentifierSupplier = Callable[[], str]


def uuid_identifier() -> str:
    """Return a fresh upper-case UUID4 string."""
    return str(uuid4()).upper()


class SequentialIdentifier:
    """Deterministic supplier producing `id_1`, `id_2`, ... in call order.

    Intended for tests and reproducible authoring sessions. Each instance
    keeps its own counter, so independent suppliers never interfere.
    """

    def __init__(self, prefix: str = 'id_', start: int = 1) -> None:
        """Initialize a supplier.

        Args:
            prefix: String prepended to every produced number.
            start: First number produced.
        """
        self.prefix = prefix
        self._counter = count(start)

    def __call__(self) -> str:
        return f'{self.prefix}{next(self._counter)}'
