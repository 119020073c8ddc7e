"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use HIGHLIGHTFILE_ prefix (e.g., HIGHLIGHTFILE_PYGMENTS_STYLE=monokai).

Settings can also be loaded from a .env file in the project root.

The per-directive option defaults (gist_script, git_host_footer, pull,
repos_dir) are not settings: they live in models/options.py and are fixed.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use HIGHLIGHTFILE_ prefix.

    Examples:
        HIGHLIGHTFILE_GIT_EXECUTABLE=/usr/local/bin/git
        HIGHLIGHTFILE_PYGMENTS_STYLE=monokai
        HIGHLIGHTFILE_PYGMENTS_NOCLASSES=true
    """

    model_config = SettingsConfigDict(
        env_prefix="HIGHLIGHTFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Git transport
    git_executable: str = Field(
        default="git",
        description="Executable used for clone and pull of repository caches",
    )

    # Highlighter configuration
    pygments_style: str = Field(
        default="default",
        description="Pygments style name used by the HTML formatter",
    )

    pygments_noclasses: bool = Field(
        default=False,
        description="Emit inline styles instead of CSS classes in highlighted output",
    )

    # File reading
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to decode embedded source files",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
