"""Tests for colors, themes and icon glyphs."""

import pytest

from neuroclass.catalog import Catalog
from neuroclass.render import classification_screen, walk
from neuroclass.viz.palette import (
    ICON_GLYPHS,
    FALLBACK_GLYPH,
    THEMES,
    get_theme,
    icon_glyph,
)


class TestThemes:
    def test_themes_share_keys(self):
        assert set(THEMES["light"]) == set(THEMES["dark"])

    def test_get_theme(self):
        assert get_theme("dark")["background"] == "#0d1117"

    def test_unknown_theme(self):
        with pytest.raises(KeyError, match="Available"):
            get_theme("sepia")


class TestIcons:
    def test_every_catalog_icon_has_a_glyph(self):
        screen = classification_screen(Catalog.default())
        icons = {n.icon for n in walk(screen) if n.icon is not None}
        assert icons <= set(ICON_GLYPHS)

    def test_known_icon(self):
        assert icon_glyph("bolt.fill") == ICON_GLYPHS["bolt.fill"]

    def test_unknown_icon(self):
        assert icon_glyph("no.such.symbol") == FALLBACK_GLYPH
