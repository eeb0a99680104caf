"""User settings for updir.

Settings control whether navigation asks for confirmation and how the
directory listing shown after a move is rendered.

Configuration is stored in ~/.config/updir/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from updir.core.paths import get_config_path

logger = logging.getLogger(__name__)


class UpdirConfig(BaseModel):
    """Settings for the updir CLI.

    Attributes:
        confirm: Ask before changing location (``--force`` bypasses it).
        list_after: List the new location after navigating.
        show_hidden: Include dot entries in listings.
        list_limit: Maximum number of entries to list (None = all).
    """

    model_config = ConfigDict(extra="forbid")

    confirm: Annotated[
        bool,
        Field(description="Ask for confirmation before changing location"),
    ] = True
    list_after: Annotated[
        bool,
        Field(description="List directory contents after navigating"),
    ] = True
    show_hidden: Annotated[
        bool,
        Field(description="Include hidden entries in listings"),
    ] = False
    list_limit: Annotated[
        int | None,
        Field(ge=1, le=10000, description="Maximum entries to list (1-10000)"),
    ] = None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> UpdirConfig:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated UpdirConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return UpdirConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> UpdirConfig:
    """Load settings, falling back to defaults when no file exists.

    Parse and schema errors still propagate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return UpdirConfig()


def save_config(config: UpdirConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The UpdirConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create config directory: {e}") from e

    # TOML has no null; unset optional values are left out
    data = config.model_dump(exclude_none=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.debug("Saved config to %s", config_path)
    return config_path
