"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from string import Formatter
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jukebot.bot.catalog import MessageKey


class BotSettings(BaseSettings):
    """
    Discord bot configuration.

    ``token``, ``server_id`` and ``text_channel_id`` have no usable
    defaults: the bot refuses to start without them, but only when ``init()``
    runs, so a settings object can always be built (e.g. for ``jukebot config``).
    """

    name: str = Field(default="Jukebot", description="Bot display name")
    token: str | None = Field(default=None, description="Discord bot token")
    server_id: int | None = Field(
        default=None, description="ID of the single guild the bot serves"
    )
    text_channel_id: int | None = Field(
        default=None,
        description="ID of the text channel the bot listens to and replies in",
    )
    debug: bool = Field(default=False, description="Emit debug-level bot logs")
    command_prefix: str = Field(
        default="!", min_length=1, description="Prefix that marks a message as a command"
    )
    messages: dict[str, str] = Field(
        default_factory=dict,
        description="Overrides for message catalog templates, keyed by message key. "
                    "Set via BOT__MESSAGES='{\"pong\": \"Pong!\"}'",
    )

    model_config = SettingsConfigDict(env_prefix="BOT_")

    @field_validator("messages")
    @classmethod
    def _known_message_keys(cls, value: dict[str, str]) -> dict[str, str]:
        known = {key.value for key in MessageKey}
        unknown = sorted(set(value) - known)
        if unknown:
            raise ValueError(f"Unknown message keys: {', '.join(unknown)}")

        # Templates are filled positionally, so only bare "{}" fields are allowed
        for key, template in value.items():
            try:
                fields = [name for _, name, _, _ in Formatter().parse(template) if name is not None]
            except ValueError as e:
                raise ValueError(f"Malformed template for message key '{key}': {e}") from e
            if any(fields):
                raise ValueError(
                    f"Template for message key '{key}' must use only '{{}}' placeholders"
                )
        return value


class Settings(BaseSettings):
    """Main application settings."""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    bot: BotSettings = Field(default_factory=BotSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
