"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"


class CORSSettings(BaseModel):
    """Browser origins allowed to call the API.

    Override with a JSON list, e.g. CORS__ALLOW_ORIGINS='["https://videos.example.com"]'.
    """

    allow_origins: list[str] = [
        "http://localhost:3000",  # Local frontend
        "http://localhost:5173",  # Vite default
    ]
    max_age: int = 600  # Seconds browsers may cache a preflight


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # OBSERVABILITY__LOGFIRE_TOKEN; without it telemetry stays on the console
    logfire_token: str | None = None

    # OBSERVABILITY__SEND_TO_LOGFIRE; None means "send if a token is set"
    send_to_logfire: bool | None = None


class CommentSettings(BaseModel):
    """Comment creation and listing configuration."""

    max_content_length: int = 10000

    # Applied when a request carries no usable limit. None = unlimited.
    default_top_level_limit: int | None = None
    default_replies_limit: int | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, e.g.:

        ENVIRONMENT=production
        PORT=8080
        COMMENTS__DEFAULT_REPLIES_LIMIT=3
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False
    port: int = 4000

    cors: CORSSettings = CORSSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    comments: CommentSettings = CommentSettings()
