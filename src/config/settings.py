"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use BOOTNAV_ prefix (e.g., BOOTNAV_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use BOOTNAV_ prefix.

    Examples:
        BOOTNAV_ID_PREFIX=nav
        BOOTNAV_ITEM_SEPARATOR=
        BOOTNAV_STRICT_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOTNAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Markup configuration
    id_prefix: str = Field(
        default="w",
        description="Prefix for generated element ids (tab links and panes)",
    )

    item_separator: str = Field(
        default="\n",
        description="Text emitted between rendered items and around container content",
    )

    fallback_tag: str = Field(
        default="button",
        description="Tag used for items that have no URL",
    )

    header_tag: str = Field(
        default="h6",
        description="Tag used for dropdown header items",
    )

    # Loader configuration
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: unknown keys in nav definitions are errors instead of warnings",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug output while rendering",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
