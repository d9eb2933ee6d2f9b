"""Render-tree builders for the Neuron Classification screen.

Each function takes catalog records (and a ScreenConfig) and returns a
Node. Nothing here touches a UI toolkit; hosts in `neuroclass.render.markup`
and `neuroclass.portal` draw the result.
"""

from neuroclass.config import ScreenConfig
from neuroclass.render.tree import node

CONNECTOR_ICON = "arrow.down.circle.fill"

STRUCTURAL_HEADING = "1. Structural Classification (by Polarity)"
STRUCTURAL_CAPTION = ("Based on the number of processes (neurites) extending "
                      "from the cell body (soma).")
FUNCTIONAL_HEADING = "2. Functional Classification (by Signal Direction)"
FUNCTIONAL_CAPTION = ("Based on the direction of signal transmission relative "
                      "to the Central Nervous System (CNS).")
NEUROTRANSMITTER_HEADING = "3. Classification by Neurotransmitter"
NEUROTRANSMITTER_CAPTION = ("Neurons can be grouped by the primary chemical "
                            "messenger they release.")


def _section(key, heading, caption, body, config):
    return node(
        "section",
        node("heading", text=heading),
        node("caption", text=caption, color=config.colors["secondary"]),
        body,
        key=key,
    )


# ---------------------------------------------------------------------------
# 1. Structural
# ---------------------------------------------------------------------------

def polarity_card(polarity, config=None):
    """A fixed-size card: icon, name, description, example."""
    config = config or ScreenConfig()
    colors = config.colors
    return node(
        "card",
        node("icon", icon=polarity.icon_name, color=colors["accent"]),
        node("title", text=polarity.name),
        node("body", text=polarity.description, color=colors["secondary"]),
        node("footnote", text=polarity.example),
        key=polarity.id,
        width=config.card_width,
        height=config.card_height,
    )


def structural_section(catalog, config=None):
    """One card per polarity type, in a horizontally scrolling row."""
    config = config or ScreenConfig()
    cards = [polarity_card(p, config) for p in catalog.polarity_types]
    return _section(
        "structural", STRUCTURAL_HEADING, STRUCTURAL_CAPTION,
        node("scroll_row", *cards, direction="horizontal"),
        config,
    )


# ---------------------------------------------------------------------------
# 2. Functional
# ---------------------------------------------------------------------------

def pathway_stage(stage, config=None):
    config = config or ScreenConfig()
    return node(
        "stage",
        node("icon", icon=stage.icon_name, color=stage.color),
        node("title", text=stage.title),
        node("subtitle", text=stage.subtitle, color=config.colors["secondary"]),
        key=stage.id,
    )


def connector(config=None):
    """Downward arrow between two consecutive stages."""
    config = config or ScreenConfig()
    return node("connector", icon=CONNECTOR_ICON, color=config.colors["secondary"])


def functional_section(catalog, config=None):
    """The stimulus-to-effector pathway as a vertical diagram.

    Stages keep catalog order; a connector sits between every consecutive
    pair, so n stages give n - 1 connectors.
    """
    config = config or ScreenConfig()
    items = []
    for i, stage in enumerate(catalog.pathway):
        if i > 0:
            items.append(connector(config))
        items.append(pathway_stage(stage, config))
    return _section(
        "functional", FUNCTIONAL_HEADING, FUNCTIONAL_CAPTION,
        node("pathway", *items, direction="vertical"),
        config,
    )


# ---------------------------------------------------------------------------
# 3. Neurotransmitters
# ---------------------------------------------------------------------------

def function_badge(function):
    """Pill-shaped label colored by neurotransmitter function."""
    return node("badge", text=function.label, color=function.color, shape="pill")


def neurotransmitter_row(neurotransmitter, config=None):
    """Icon, name, role text (clipped by the host), and function badge.

    The roles node carries the full `key_roles` string; `line_limit` tells
    the host how many lines to show.
    """
    config = config or ScreenConfig()
    function = neurotransmitter.function
    return node(
        "row",
        node("icon", icon=neurotransmitter.icon_name, color=function.color),
        node("name", text=neurotransmitter.name),
        node("roles", text=neurotransmitter.key_roles,
             color=config.colors["secondary"], line_limit=config.line_limit),
        function_badge(function),
        key=neurotransmitter.id,
    )


def neurotransmitter_section(catalog, config=None):
    config = config or ScreenConfig()
    rows = [neurotransmitter_row(nt, config) for nt in catalog.neurotransmitters]
    return _section(
        "neurotransmitters", NEUROTRANSMITTER_HEADING, NEUROTRANSMITTER_CAPTION,
        node("list", *rows),
        config,
    )


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------

def classification_screen(catalog, config=None):
    """The full screen: title and the three sections, in order."""
    config = config or ScreenConfig()
    return node(
        "screen",
        structural_section(catalog, config),
        functional_section(catalog, config),
        neurotransmitter_section(catalog, config),
        text=config.title,
        theme=config.theme,
    )
