"""In-memory authoring model for UI test specifications.

The `testoria` package keeps a hierarchy of test suites, each holding
scenarios, each holding an ordered list of steps (an action applied to
a UI element).

Key features:
- a single manager owning the hierarchy and enforcing its invariants;
- immutable Pydantic entities handed out as point-in-time snapshots;
- injected identifier suppliers for deterministic identities;
- YAML element catalogs and a small command-line interface.
"""

from .errors import (
    CatalogError,
    ModelError,
    ModelOperationError,
    RecurringScenarioName,
    RecurringSuiteName,
    ScenarioNotFound,
    SuiteNotFound,
)
from .identifiers import IdentifierSupplier, SequentialIdentifier, uuid_identifier
from .manager import TestModelManager
from .schema import Action, Element, ElementType, Scenario, ScenarioId, Step, Suite, SuiteId

__all__ = (
    'Action',
    'CatalogError',
    'Element',
    'ElementType',
    'IdentifierSupplier',
    'ModelError',
    'ModelOperationError',
    'RecurringScenarioName',
    'RecurringSuiteName',
    'Scenario',
    'ScenarioId',
    'ScenarioNotFound',
    'SequentialIdentifier',
    'Step',
    'Suite',
    'SuiteId',
    'SuiteNotFound',
    'TestModelManager',
    'uuid_identifier',
)
