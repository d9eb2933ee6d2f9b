"""View-building functions for the classification screen.

Each view takes a Catalog and a ScreenConfig and returns a Panel layout.
Layout nodes of the render tree (screen, section, list, scroll row) become
Panel columns and rows; every other node is drawn by the HTML renderer and
wrapped in an HTML pane.
"""

try:
    import panel as pn
    HAS_PANEL = True
except ImportError:
    HAS_PANEL = False

from neuroclass.catalog import Catalog
from neuroclass.config import ScreenConfig
from neuroclass.render import (
    structural_section,
    functional_section,
    neurotransmitter_section,
    to_html,
)
from neuroclass.utils import get_logger

LOG = get_logger("portal.views")

_COLUMNS = ("section", "list")


def _require_panel():
    if not HAS_PANEL:
        raise ImportError(
            "Panel is required for the portal. Install with: pip install panel"
        )


def to_panel(n, config=None):
    """Convert a render tree to Panel objects.

    Parameters
    ----------
    n : Node
        Root of the tree to draw.
    config : ScreenConfig, optional

    Returns
    -------
    pn.viewable.Viewable
    """
    _require_panel()
    config = config or ScreenConfig()
    colors = config.colors

    if n.kind == "screen":
        return pn.Column(
            pn.pane.Markdown(f"# {n.text}", styles={"color": colors["text"]}),
            *[to_panel(c, config) for c in n.children],
            styles={"background": colors["background"]},
            sizing_mode="stretch_width",
        )
    if n.kind in _COLUMNS:
        return pn.Column(
            *[to_panel(c, config) for c in n.children],
            sizing_mode="stretch_width",
        )
    if n.kind == "scroll_row":
        return pn.Row(
            *[to_panel(c, config) for c in n.children],
            scroll=True,
            sizing_mode="stretch_width",
        )
    if n.kind == "heading":
        return pn.pane.Markdown(f"## {n.text}", styles={"color": colors["text"]})
    if n.kind == "caption":
        return pn.pane.Markdown(n.text, styles={"color": n.color})
    if n.kind == "card":
        return pn.pane.HTML(to_html(n, config), width=n.prop("width"),
                            height=n.prop("height") + 10)
    return pn.pane.HTML(to_html(n, config), sizing_mode="stretch_width")


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def structural_view(catalog=None, config=None):
    """Polarity cards in a horizontally scrolling row."""
    _require_panel()
    catalog = catalog or Catalog.default()
    LOG.debug("Structural view: %d cards", len(catalog.polarity_types))
    return to_panel(structural_section(catalog, config), config)


def functional_view(catalog=None, config=None):
    """The five-stage signal pathway."""
    _require_panel()
    catalog = catalog or Catalog.default()
    LOG.debug("Functional view: %d stages", len(catalog.pathway))
    return to_panel(functional_section(catalog, config), config)


def neurotransmitter_view(catalog=None, config=None):
    """One row per neurotransmitter, with a colored function badge."""
    _require_panel()
    catalog = catalog or Catalog.default()
    LOG.debug("Neurotransmitter view: %d rows", len(catalog.neurotransmitters))
    return to_panel(neurotransmitter_section(catalog, config), config)
