"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MODELGATE_ prefix (e.g., MODELGATE_DEBUG_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MODELGATE_ prefix.

    Examples:
        MODELGATE_QUERY_PARAM=variants
        MODELGATE_DEBUG_MODE=true
        MODELGATE_STRIP_MARKERS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MODELGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Request configuration
    query_param: str = Field(
        default="models",
        description="URL query parameter carrying the comma-separated enabled models",
    )

    # Directive configuration
    hide_literal: str = Field(
        default="bullet:hide",
        description="Toggle heading that hides the toggle unconditionally (compared case-insensitively)",
    )

    strip_markers: bool = Field(
        default=True,
        description="Remove %Show()%/%Hide()% markers from display text after filtering",
    )

    # Diagnostics
    debug_mode: bool = Field(
        default=False,
        description="Log every visibility decision",
    )

    def hideLiteral_normalized(self) -> str:
        """
        Hide literal in the form titles are compared against.

        Example:
            >>> settings = AppSettings(hide_literal="`Bullet:Hide`")
            >>> settings.hideLiteral_normalized()
            'bullet:hide'
        """
        return self.hide_literal.replace("`", "").strip().lower()


# Singleton instance - import this in your code
appsettings = AppSettings()
