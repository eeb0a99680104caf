"""Colors for listings and messages.

The bundled data/theme.toml holds the defaults. A ``[colors]`` table in the
user's theme.toml (next to config.toml) overrides single entries.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from rich.theme import Theme

from updir.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class ThemeColors(BaseModel):
    """One hex color (#RGB or #RRGGBB) per style updir prints with."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    directory: HexColor = "#0e8ac8"
    file: HexColor = "#ffffff"
    symlink: HexColor = "#69B9A1"
    dead_symlink: HexColor = "#f53263"


def _parse_colors(text: str) -> dict[str, object]:
    colors = tomllib.loads(text).get("colors", {})
    if not isinstance(colors, dict):
        msg = "'colors' must be a table"
        raise ValueError(msg)
    return colors


def load_colors(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors with the user's overrides applied.

    A missing user file is normal. One that cannot be read, parsed or
    validated is ignored with a warning, leaving the bundled colors.

    Args:
        user_path: Override file. Defaults to the XDG theme path.
    """
    bundled = _parse_colors(
        resources.files("updir.data").joinpath("theme.toml").read_text(encoding="utf-8")
    )
    path = user_path or get_user_theme_path()
    try:
        overrides = _parse_colors(path.read_text(encoding="utf-8"))
        return ThemeColors.model_validate({**bundled, **overrides})
    except FileNotFoundError:
        pass
    except (OSError, ValueError) as e:
        # TOMLDecodeError and pydantic's ValidationError are ValueErrors
        logger.warning("Ignoring theme overrides in %s: %s", path, e)
    return ThemeColors.model_validate(bundled)


def to_rich_theme(colors: ThemeColors) -> Theme:
    """Map colors onto the style names used by the CLI."""
    return Theme(
        {
            "muted": colors.muted,
            "header": f"bold {colors.header}",
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "entry.directory": f"bold {colors.directory}",
            "entry.file": colors.file,
            "entry.symlink": f"italic {colors.symlink}",
            "entry.dead_symlink": f"strike {colors.dead_symlink}",
        }
    )


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loaded once per process."""
    return to_rich_theme(load_colors())
