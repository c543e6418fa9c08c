"""
Configuration settings for HC.

Values come from the environment (prefix ``HC_``) or a ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_FILENAME = "hc.db"


class Settings(BaseSettings):
    """Server, storage and logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Address the server binds to")
    port: int = Field(default=8080, description="Port the server listens on")
    db_path: Path | None = Field(
        default=None,
        description="Explicit SQLite database file",
    )
    test_db_path: Path | None = Field(
        default=None,
        description="Database file used by test runs (HC_TEST_DB_PATH)",
    )
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".hc",
        description="Directory holding the default database file",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    frontend_dir: Path | None = Field(
        default=None,
        description="Directory of pre-built UI assets served at /",
    )

    def database_path(self) -> Path:
        """
        Resolve the SQLite file to open.

        An explicit ``db_path`` wins, then ``test_db_path``, then
        ``<data_dir>/hc.db``. The data directory is created when needed.
        """
        if self.db_path is not None:
            return self.db_path
        if self.test_db_path is not None:
            return self.test_db_path

        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir / DATABASE_FILENAME


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
