"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rebac.core.constants import (
    DEFAULT_ACTOR_INDEX_TABLE,
    DEFAULT_OBJECT_INDEX_TABLE,
    DEFAULT_PERMISSION_TABLE,
    RULE_CACHE_TTL_MS,
)


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults. database_url is optional; the SQL store
    adapter raises SqlNotConfiguredException when it is needed but unset.
    """

    # App
    app_name: str = "rebac"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = ""
    database_echo: bool = False
    # Access-list query dialect: "postgres" (quoted identifiers) or "sql" (bare identifiers)
    sql_dialect: str = "postgres"
    actor_index_table: str = DEFAULT_ACTOR_INDEX_TABLE
    object_index_table: str = DEFAULT_OBJECT_INDEX_TABLE
    permission_table: str = DEFAULT_PERMISSION_TABLE

    # Redis (decision cache)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    rule_cache_ttl_ms: int = RULE_CACHE_TTL_MS

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_dialect_and_cache(self) -> "Settings":
        """Validate the SQL dialect name and the decision cache TTL."""
        if self.sql_dialect not in ("postgres", "sql"):
            raise ValueError(
                f"sql_dialect must be 'postgres' or 'sql', got: {self.sql_dialect!r}"
            )
        if self.rule_cache_ttl_ms <= 0:
            raise ValueError(
                f"rule_cache_ttl_ms must be positive, got: {self.rule_cache_ttl_ms}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
