"""Configuration management using Pydantic Settings."""

from importlib.metadata import version as _pkg_version

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_version() -> str:
    try:
        return _pkg_version("anki-mcp")
    except Exception:
        return "0.0.0"


class AnkiSettings(BaseSettings):
    """Anki MCP Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANKI_",
        extra="ignore",
    )

    # Server metadata
    server_name: str = Field(default="anki-mcp")
    server_version: str = Field(default_factory=_get_version)

    # AnkiConnect
    connect_url: str = Field(default="http://127.0.0.1:8765")
    api_version: int = Field(default=6)
    api_key: str | None = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)

    # Bulk operation defaults
    tag_batch_size: int = Field(default=50, ge=1)
    field_batch_size: int = Field(default=25, ge=1)
    card_batch_size: int = Field(default=100, ge=1)

    # Feature flags
    enable_gui_tools: bool = Field(default=True)
    enable_media_tools: bool = Field(default=True)
    enable_model_tools: bool = Field(default=True)


settings = AnkiSettings()
