"""Runtime settings resolved from the environment."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from testoria.catalog import load_catalog
from testoria.identifiers import IdentifierSupplier, SequentialIdentifier, uuid_identifier
from testoria.manager import TestModelManager
from testoria.models import SettingsModel

type LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class Settings(SettingsModel):
    """Settings for building a test model manager.

    Values are read from environment variables prefixed with
    `TESTORIA_`, for example `TESTORIA_CATALOG=elements.yaml`.
    """

    model_config = SettingsConfigDict(
        env_prefix='TESTORIA_',
        frozen=True,
        extra='ignore',
    )

    catalog: Path | None = Field(
        default=None,
        title='Element catalog',
        description='Path to the YAML element catalog.',
    )

    id_prefix: str | None = Field(
        default=None,
        title='Sequential identifier prefix',
        description=(
            'When set, identifiers are generated sequentially '
            '(for example, `id_1`, `id_2`) instead of as UUIDs.'
        ),
    )

    log_level: LogLevel = Field(
        default='WARNING',
        title='Logging level',
    )

    def make_manager(self) -> TestModelManager:
        """Build a manager from the resolved settings.

        Raises:
            CatalogError: If the configured catalog cannot be loaded.
        """
        generate_id: IdentifierSupplier = uuid_identifier
        if self.id_prefix is not None:
            generate_id = SequentialIdentifier(self.id_prefix)

        elements = load_catalog(self.catalog) if self.catalog else ()

        return TestModelManager(generate_id, elements)
