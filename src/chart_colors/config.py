"""
Color Configuration - Source of the default palette for new color resolvers.
"""

import logging
from typing import Optional, Sequence

from .palettes import PALETTES, get_palette

logger = logging.getLogger(__name__)

DEFAULT_THEME = "light"


class ColorConfig:
    """
    Holds the default colors seeded into every new ColorResolver.

    The theme's palette is used until set_default_colors() overrides it.
    Changing the defaults does not affect resolvers that already exist.
    """

    def __init__(self, theme: str = DEFAULT_THEME):
        if theme not in PALETTES:
            raise ValueError(f"Unknown theme: {theme!r} (expected one of {sorted(PALETTES)})")
        self._theme = theme
        self._default_colors: Optional[list] = None

    @property
    def theme(self) -> str:
        return self._theme

    def default_colors(self) -> list:
        """Return a copy of the current default color sequence."""
        if self._default_colors is not None:
            return list(self._default_colors)
        return get_palette(self._theme)

    def set_default_colors(self, colors: Optional[Sequence]) -> "ColorConfig":
        """
        Replace the default colors. Passing None restores the theme palette.

        Args:
            colors: Sequence of colors, or None.

        Returns:
            This config, for chaining.
        """
        if colors is None:
            self._default_colors = None
            logger.debug("Default colors reset to '%s' palette", self._theme)
        else:
            self._default_colors = list(colors)
            logger.debug("Default colors set to %d custom colors", len(self._default_colors))
        return self


# Shared config used by resolvers built without an explicit one
config = ColorConfig()
