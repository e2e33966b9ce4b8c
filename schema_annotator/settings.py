"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from schema_annotator.exceptions import SettingsError


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )

    schema_indent: int = Field(
        default=2,
        ge=0,
        validation_alias="SCHEMA_INDENT",
        description="Indentation used when rendering the schema as text.",
    )

    app_title: str = Field(
        default="JSON Schema Generator",
        validation_alias="APP_TITLE",
        description="Title of the Gradio app.",
    )
    server_name: str | None = Field(
        default=None,
        validation_alias="SERVER_NAME",
        description="Host the Gradio app binds to.",
    )
    server_port: int | None = Field(
        default=None,
        validation_alias="SERVER_PORT",
        description="Port the Gradio app listens on.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise SettingsError(exc=exc) from exc
