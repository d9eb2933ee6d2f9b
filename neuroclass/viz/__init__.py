"""Visualization: named colors, screen surfaces and icon glyphs."""

from neuroclass.viz.palette import (
    RED,
    BLUE,
    PURPLE,
    GREEN,
    ORANGE,
    THEMES,
    ICON_GLYPHS,
    FALLBACK_GLYPH,
    get_theme,
    icon_glyph,
)
