import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Pydantic Settings reads env vars prefixed with CODED_ERRORS_ (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # Frames kept per captured trace when the factory cannot widen the limit
    stack_trace_limit: int = 10
    # False mimics a host that forbids changing the limit; capture then uses it as-is
    stack_trace_limit_writable: bool = True
    # Switches ERR_UNSUPPORTED_ESM_URL_SCHEME to the Windows wording
    is_windows: bool = Field(default_factory=lambda: sys.platform == "win32")

    model_config = SettingsConfigDict(
        env_prefix="CODED_ERRORS_",
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
