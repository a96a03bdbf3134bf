"""
Configuration management for Oneliners.

Paths:
- Store: ~/.oneliners (fixed, no override)
- Config: ~/.config/oneliners/config.toml (XDG_CONFIG_HOME respected)
"""

from pathlib import Path
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from oneliners.errors import ConfigError, HomeDirectoryError

STORE_FILENAME = ".oneliners"

DEFAULT_CLIPBOARD_COMMAND = ["xclip", "-selection", "clipboard"]


class ClipboardSettings(BaseModel):
    """[clipboard] table."""

    command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CLIPBOARD_COMMAND),
        min_length=1,
        description="argv of the clipboard utility; stdin receives the snippet",
    )
    strict: bool = Field(
        default=False,
        description="Wait for the utility and report copy failures",
    )
    timeout: float = Field(default=5.0, gt=0, description="Strict mode wait, seconds")


class LoggingSettings(BaseModel):
    """[logging] table."""

    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class Settings(BaseModel):
    """Validated contents of config.toml."""

    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_home_dir() -> Path:
    """
    Get the user's home directory.

    Raises:
        HomeDirectoryError: if the platform cannot report one.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(f"Unable to locate home directory: {e}") from e

    if not home.is_absolute():
        raise HomeDirectoryError(f"Unable to locate home directory (got {home})")
    return home


def get_store_path() -> Path:
    """Get the path to the oneliners store file (~/.oneliners)."""
    return get_home_dir() / STORE_FILENAME


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/oneliners)."""
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home) / "oneliners"
    return get_home_dir() / ".config" / "oneliners"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def load_config(config_path: Path | None = None) -> Settings:
    """
    Load configuration from config.toml.

    Returns default settings if the file doesn't exist, or if there is no
    home directory to look in. A missing home directory is reported later,
    when the store path is resolved.

    Raises:
        ConfigError: if the file exists but is not valid TOML or fails validation.
    """
    if config_path is None:
        try:
            config_path = get_config_path()
        except HomeDirectoryError:
            return get_default_config()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def get_default_config() -> Settings:
    """Return default configuration."""
    return Settings()
