from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_level_name

class Settings(BaseSettings):
    """
    Runtime settings for termlog, loaded from `TERMLOG_*` environment variables.

    The semantic style table itself is fixed; these knobs only control how the
    output is rendered and where the package's own diagnostics go.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Package diagnostics (stdlib logging)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Console output
    LOG_COLOR: bool = True
    LOG_TO_STDOUT: bool = True

    # HTTP observers
    LOG_BODY_MAX_BYTES: int = 65_536

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | int | None) -> str | None:
        """
        Normalize the LOG_LEVEL environment variable value to uppercase.

        The stdlib logging module expects level names in uppercase ("DEBUG",
        "INFO", ...), so `TERMLOG_LOG_LEVEL=debug` or a numeric level is accepted as well.
        """
        return to_level_name(v)

    model_config = SettingsConfigDict(
        env_prefix="TERMLOG_",
        # Optional .env next to the package root; missing files are ignored.
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

# Settings are read from the environment once; tests call get_settings.cache_clear()
# after changing TERMLOG_* variables.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
