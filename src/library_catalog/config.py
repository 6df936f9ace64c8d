"""Configuration management for the Library Catalog.

Settings are read from the environment (``LIBRARY_CATALOG_`` prefix) or an
optional ``.env`` file:
1. Presentation - Application name shown by the menu
2. Logging - Level and debug switch
3. Circulation - How a return affects book availability
4. Shelving - Defaults for shelves created automatically
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReturnPolicy(str, Enum):
    """How ``Library.return_book`` treats the returned copy."""

    # The returned copy goes back on the shelf and can be borrowed again
    RESTORE = "restore"
    # Returns leave availability untouched
    HISTORICAL = "historical"


class CatalogConfig(BaseSettings):
    """Library Catalog configuration.

    The catalog keeps all state in memory, so configuration only covers
    behavior switches and defaults:
    - Logging verbosity
    - Return policy for circulation
    - Capacity, floor and copy counts used when the catalog creates
      shelves and sample books on its own
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Presentation ===

    app_name: str = Field(
        default="library-catalog",
        description="Name shown in the menu header",
        min_length=1,
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging regardless of log_level",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Circulation ===

    return_policy: ReturnPolicy = Field(
        default=ReturnPolicy.RESTORE,
        description="Whether returning a book makes the copy available again",
    )

    # === Shelving ===

    default_shelf_capacity: int = Field(
        default=100,
        description="Capacity recorded on shelves created automatically",
        ge=0,
    )

    default_shelf_floor: int = Field(
        default=1,
        description="Floor recorded on shelves created automatically",
    )

    bulk_copies: int = Field(
        default=5,
        description="Total and available copies of each generated book",
        ge=0,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def restores_on_return(self) -> bool:
        """Check if returns make copies available again."""
        return self.return_policy == ReturnPolicy.RESTORE


class _ConfigStore:
    """Internal storage for the configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
