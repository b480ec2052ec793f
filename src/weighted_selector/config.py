"""Configuration system for weighted-selector.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WRS_*) -> .env file -> field defaults.

Overrides are applied via resolve_config() which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_selector.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SelectorConfig(BaseSettings):
    """Configuration for weighted-selector.

    Resolution order: init kwargs -> env vars (WRS_*) -> .env file -> defaults.

    The two thresholds are the search-strategy crossover points: selectors
    holding fewer items than the threshold use linear search, selectors at
    or above it use binary search.
    """

    model_config = SettingsConfigDict(
        env_prefix="WRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Search strategy ---

    threshold: int = Field(
        default=51,
        ge=1,
        description="Item count at which static selectors switch from linear to binary search",
    )
    dynamic_threshold: int = Field(
        default=26,
        ge=1,
        description="Item count at which the dynamic selector switches to binary search",
    )

    # --- Randomness ---

    random_source_type: str = Field(
        default="seeded",
        description="Random source identifier: 'seeded' (reproducible) or 'system'",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Build logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all build records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}"
            )
        return value


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(SelectorConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of field name to new value.

    Raises:
        ConfigValidationError: If any key is not a known config field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")


def resolve_config(
    defaults: SelectorConfig,
    overrides: dict[str, Any] | None,
) -> SelectorConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new SelectorConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation, so run the full validator
    # on a merged dict to get type coercion and range checks.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return SelectorConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
