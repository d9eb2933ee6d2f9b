"""Tests for the HTML renderer."""

from html import escape

import pytest

from neuroclass.catalog import Catalog, Neurotransmitter
from neuroclass.catalog.models import NeurotransmitterFunction
from neuroclass.config import ScreenConfig
from neuroclass.render import (
    node,
    polarity_card,
    functional_section,
    neurotransmitter_row,
    classification_screen,
    to_html,
    render_page,
    save_page,
)
from neuroclass.viz.palette import ICON_GLYPHS, FALLBACK_GLYPH, THEMES


LONG_ROLES = " ".join(["Shapes attention, arousal and learning in many circuits."] * 10)


@pytest.fixture
def catalog():
    return Catalog.default()


class TestFragments:
    def test_card(self, catalog):
        html = to_html(polarity_card(catalog.polarity_types[0]))
        assert 'class="nc-card"' in html
        assert 'data-key="multipolar"' in html
        assert "width: 180px" in html
        assert "Multipolar" in html
        assert ICON_GLYPHS["arrow.up.and.down.and.arrow.left.and.right"] in html

    def test_pathway_has_four_connectors(self, catalog):
        html = to_html(functional_section(catalog))
        assert html.count('class="nc-stage"') == 5
        assert html.count('class="nc-connector"') == 4
        assert html.index("Stimulus") < html.index("Interneuron") < html.index("Effector")

    def test_gaba_badge(self, catalog):
        gaba = catalog.neurotransmitters[1]
        html = to_html(neurotransmitter_row(gaba))
        color = NeurotransmitterFunction.INHIBITORY.color
        assert f'<span class="nc-badge" style="color: {color}; background: {color}33' in html
        assert ">Inhibitory</span>" in html

    def test_roles_clamped_not_cut(self):
        nt = Neurotransmitter("x", "Long", "Modulatory", LONG_ROLES, "bolt.fill")
        html = to_html(neurotransmitter_row(nt))
        assert "-webkit-line-clamp: 2" in html
        assert f'title="{escape(LONG_ROLES)}"' in html
        assert f">{escape(LONG_ROLES)}</div>" in html

    def test_text_is_escaped(self, catalog):
        html = to_html(neurotransmitter_row(catalog.neurotransmitters[-1]))
        assert "&#x27;fight-or-flight&#x27;" in html
        assert "'fight-or-flight'" not in html

    def test_unknown_icon_uses_fallback(self):
        html = to_html(node("icon", icon="no.such.symbol", color="#000000"))
        assert FALLBACK_GLYPH in html
        assert 'data-icon="no.such.symbol"' in html

    def test_unknown_kind_raises(self):
        with pytest.raises(KeyError, match="No HTML renderer"):
            to_html(node("carousel"))


class TestPage:
    def test_render_page(self, catalog):
        page = render_page(catalog)
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Neuron Classification</title>" in page
        assert page.count('class="nc-card"') == 4
        assert page.count('class="nc-row"') == 6
        assert page.count('class="nc-badge"') == 6

    def test_render_page_idempotent(self, catalog):
        assert render_page(catalog) == render_page(catalog)

    def test_dark_theme(self, catalog):
        page = render_page(catalog, ScreenConfig(theme="dark"))
        assert THEMES["dark"]["background"] in page

    def test_custom_title(self, catalog):
        page = render_page(catalog, ScreenConfig(title="Neurons & Glia"))
        assert "<title>Neurons &amp; Glia</title>" in page

    def test_save_page(self, catalog, tmp_path):
        path = save_page(tmp_path / "neurons.html", catalog)
        assert path.exists()
        assert path.read_text(encoding="utf-8") == render_page(catalog)

    def test_screen_fragment_matches_page_body(self, catalog):
        fragment = to_html(classification_screen(catalog))
        assert fragment in render_page(catalog)
