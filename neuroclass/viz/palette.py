"""Colors and icons for the classification screen.

Every render-tree node carries a color as a hex string and an icon as an
opaque symbol name (e.g. "bolt.fill"). This module owns both vocabularies:
the named colors used by the catalog, the two screen themes, and the local
glyph table that stands in for the platform's symbol font.
"""

from typing import Dict

from neuroclass.utils import get_logger

LOG = get_logger("viz")


# ---------------------------------------------------------------------------
# Named colors — domain-meaningful, perceptually distinct
# ---------------------------------------------------------------------------

RED = "#F44336"
BLUE = "#2196F3"
PURPLE = "#9C27B0"
GREEN = "#4CAF50"
ORANGE = "#FF9800"


# ---------------------------------------------------------------------------
# Themes — surfaces and text colors
# ---------------------------------------------------------------------------

THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "background": "#F2F2F7",
        "surface":    "#FFFFFF",
        "text":       "#1C1C1E",
        "secondary":  "#8E8E93",
        "accent":     BLUE,
        "shadow":     "rgba(0, 0, 0, 0.05)",
    },
    "dark": {
        "background": "#0d1117",
        "surface":    "#161b22",
        "text":       "#c9d1d9",
        "secondary":  "#8b949e",
        "accent":     "#58a6ff",
        "shadow":     "rgba(0, 0, 0, 0.4)",
    },
}
"""Screen surfaces per theme name."""


def get_theme(name):
    """Look up a theme by name.

    Raises
    ------
    KeyError
        If the theme is not defined.
    """
    if name not in THEMES:
        raise KeyError(
            f"Unknown theme '{name}'. Available: {list(THEMES.keys())}"
        )
    return THEMES[name]


# ---------------------------------------------------------------------------
# Icons — symbol name -> local glyph
# ---------------------------------------------------------------------------

ICON_GLYPHS: Dict[str, str] = {
    # polarity
    "arrow.up.and.down.and.arrow.left.and.right": "\u2725",
    "arrow.up.and.down":                          "\u2195",
    "arrow.up":                                   "\u2191",
    "circle.grid.3x3.fill":                       "\u2637",
    # pathway
    "sensor.tag.fill":          "\U0001F4E1",
    "wave.3.right.circle.fill": "\u21E2",
    "link.circle.fill":         "\U0001F517",
    "wave.3.left.circle.fill":  "\u21E0",
    "figure.walk.motion":       "\U0001F6B6",
    "arrow.down.circle.fill":   "\u2B07",
    # neurotransmitters
    "brain.head.profile": "\U0001F9E0",
    "bed.double.fill":    "\U0001F6CF",
    "smiley.fill":        "\U0001F642",
    "dial.medium.fill":   "\U0001F39A",
    "figure.run":         "\U0001F3C3",
    "bolt.fill":          "\u26A1",
}
"""Local stand-ins for the platform's symbol names."""

FALLBACK_GLYPH = "\u2022"


def icon_glyph(name):
    """Resolve a symbol name to a displayable glyph.

    Unknown names render as a neutral bullet so a missing asset never
    breaks the screen; the miss is logged.
    """
    glyph = ICON_GLYPHS.get(name)
    if glyph is None:
        LOG.warning("No glyph for icon '%s'; using fallback", name)
        return FALLBACK_GLYPH
    return glyph
