"""Console styles for the targetsweep CLI.

The palette ships inside the package (``targetsweep/data/theme.toml``)
and is the only source of colors; nothing is read from the user's home.
"""

import logging
import re
import tomllib
from importlib import resources
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used for diagnostics and log records. Values are #RGB or #RRGGBB."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"{info.field_name}: expected a #RGB or #RRGGBB color, got {v!r}"
            raise ValueError(msg)
        return v.strip()


def load_bundled_colors() -> ThemeColors:
    """Read the palette bundled with the package.

    A missing or broken data file means a damaged installation; the
    built-in defaults are used instead.
    """
    data_file = resources.files("targetsweep.data").joinpath("theme.toml")
    try:
        colors = tomllib.loads(data_file.read_text(encoding="utf-8")).get("colors", {})
        return ThemeColors(**colors)
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        logger.error("Bundled theme is unusable, installation may be corrupted: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Map the palette onto the style names used by the CLI and RichHandler."""
    if colors is None:
        colors = load_bundled_colors()

    return Theme(
        {
            "muted": colors.muted,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "logging.level.debug": colors.muted,
            "logging.level.info": colors.info,
            "logging.level.warning": colors.warning,
            "logging.level.error": f"bold {colors.error}",
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
