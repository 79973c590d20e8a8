"""Color theme for the yeet CLI.

Colors default to the values on ``ThemeColors``; individual colors can be
overridden in the ``[colors]`` table of ~/.config/yeet/theme.toml.
"""

import logging
import re
import tomllib
from functools import cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from yeet.core.errors import HomeDirectoryUnavailable
from yeet.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) used by the CLI styles."""

    model_config = ConfigDict(extra="ignore")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    path_dumpster: str = "#f5b332"
    path_home: str = "#69B9A1"

    @field_validator("*")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        color = v.strip()
        if not _HEX_COLOR.fullmatch(color):
            raise ValueError(f"invalid hex color '{v}'")
        return color


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors, applying user overrides from ``path``.

    A missing, unreadable or invalid theme file yields the defaults.
    """
    if path is None:
        try:
            path = get_theme_path()
        except HomeDirectoryUnavailable:
            return ThemeColors()

    try:
        with open(path, "rb") as f:
            overrides = tomllib.load(f).get("colors", {})
        return ThemeColors.model_validate(overrides)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors onto the Rich style names the CLI prints with."""
    return Theme(
        {
            "muted": colors.muted,
            "border": colors.border,
            "bold_header": f"bold {colors.header}",
            "success": colors.success,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "path.dumpster": colors.path_dumpster,
            "path.home": colors.path_home,
        }
    )


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loading the user's theme file on first use."""
    return get_rich_theme(load_theme())
