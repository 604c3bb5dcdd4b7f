"""Base Pydantic models for authoring entities.

This module defines the foundational model classes used by all entities
of the test hierarchy. It enforces immutability and strict schema
validation so that snapshots handed to callers never change under them.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all authoring entities.

    This class serves as the root for all Pydantic models representing
    suites, scenarios, steps, elements and their identities.

    Design principles enforced by this model:
        - Immutability: entities cannot be modified after creation.
          Updates produce new values through `model_copy`, so a snapshot
          returned to a caller is never altered retroactively.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos in catalog files.

    All entity models must inherit from this class.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for runtime settings.

    This class serves as the root for all settings models responsible for
    resolving runtime configuration from environment variables.

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown or extra fields are ignored.
          This allows the surrounding environment to contain unrelated
          variables without breaking configuration resolution.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
