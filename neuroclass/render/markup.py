"""Render-tree to HTML.

`to_html` draws any Node as an HTML fragment with inline styles;
`render_page` wraps the whole screen in a standalone document. The Panel
portal reuses the fragments for its leaves.

Text is escaped and never cut: line limits become CSS line clamping, and
the full string is kept in the element and its `title` attribute.
"""

from html import escape
from pathlib import Path

from neuroclass.config import ScreenConfig
from neuroclass.render.sections import classification_screen
from neuroclass.viz.palette import icon_glyph
from neuroclass.utils import get_logger

LOG = get_logger("render.markup")

FONT_STACK = ("-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, "
              "Helvetica, Arial, sans-serif")


def _style(**rules):
    """Inline CSS from keyword arguments (underscores become dashes)."""
    return "; ".join(f"{k.replace('_', '-')}: {v}" for k, v in rules.items())


def _tint(color, alpha="33"):
    """A translucent version of a #RRGGBB color."""
    return f"{color}{alpha}"


def _key_attr(n):
    return f' data-key="{escape(str(n.key))}"' if n.key is not None else ""


def _children(n, config):
    return "".join(to_html(c, config) for c in n.children)


# ---------------------------------------------------------------------------
# Per-kind renderers
# ---------------------------------------------------------------------------

def _screen(n, config):
    colors = config.colors
    style = _style(background=colors["background"], color=colors["text"],
                   font_family=FONT_STACK, padding="16px",
                   display="flex", flex_direction="column", gap="30px")
    title = f'<h1 class="nc-title">{escape(n.text or "")}</h1>'
    return f'<main class="nc-screen" style="{style}">{title}{_children(n, config)}</main>'


def _section(n, config):
    style = _style(display="flex", flex_direction="column", gap="15px")
    return (f'<section class="nc-section"{_key_attr(n)} style="{style}">'
            f'{_children(n, config)}</section>')


def _heading(n, config):
    return f'<h2 class="nc-heading" style="margin: 0">{escape(n.text)}</h2>'


def _caption(n, config):
    style = _style(color=n.color, margin="0", font_size="15px")
    return f'<p class="nc-caption" style="{style}">{escape(n.text)}</p>'


def _scroll_row(n, config):
    style = _style(display="flex", flex_direction="row", gap="15px",
                   overflow_x="auto", padding="5px 0")
    return f'<div class="nc-scroll-row" style="{style}">{_children(n, config)}</div>'


def _card(n, config):
    colors = config.colors
    style = _style(width=f"{n.prop('width')}px", height=f"{n.prop('height')}px",
                   flex="0 0 auto", box_sizing="border-box", padding="16px",
                   display="flex", flex_direction="column", gap="10px",
                   background=colors["surface"], border_radius="15px",
                   box_shadow=f"0 5px 5px {colors['shadow']}")
    return f'<div class="nc-card"{_key_attr(n)} style="{style}">{_children(n, config)}</div>'


def _icon(n, config):
    style = _style(color=n.color, font_size="28px", width="40px",
                   text_align="center")
    return (f'<span class="nc-icon" data-icon="{escape(n.icon)}" style="{style}">'
            f'{icon_glyph(n.icon)}</span>')


def _text(css_class, tag="div", **rules):
    def render(n, config):
        css = dict(rules)
        if n.color is not None:
            css["color"] = n.color
        return f'<{tag} class="{css_class}" style="{_style(**css)}">{escape(n.text)}</{tag}>'
    return render


def _pathway(n, config):
    style = _style(display="flex", flex_direction="column", padding="16px",
                   background=config.colors["surface"], border_radius="15px")
    return f'<div class="nc-pathway" style="{style}">{_children(n, config)}</div>'


def _stage(n, config):
    icon, *labels = n.children
    style = _style(display="flex", align_items="center", gap="12px")
    text = "".join(to_html(c, config) for c in labels)
    return (f'<div class="nc-stage"{_key_attr(n)} style="{style}">'
            f'{to_html(icon, config)}<div>{text}</div></div>')


def _connector(n, config):
    style = _style(color=n.color, text_align="center", padding="8px 0",
                   font_size="22px")
    return (f'<div class="nc-connector" data-icon="{escape(n.icon)}" style="{style}">'
            f'{icon_glyph(n.icon)}</div>')


def _list(n, config):
    style = _style(display="flex", flex_direction="column", gap="12px")
    return f'<div class="nc-list" style="{style}">{_children(n, config)}</div>'


def _row(n, config):
    icon, name, roles, badge = n.children
    style = _style(display="flex", align_items="center", gap="15px",
                   padding="16px", background=config.colors["surface"],
                   border_radius="10px")
    middle = (f'<div style="{_style(flex="1", display="flex", flex_direction="column", gap="4px")}">'
              f'{to_html(name, config)}{to_html(roles, config)}</div>')
    return (f'<div class="nc-row"{_key_attr(n)} style="{style}">'
            f'{to_html(icon, config)}{middle}{to_html(badge, config)}</div>')


def _roles(n, config):
    limit = n.prop("line_limit")
    rules = dict(color=n.color, font_size="12px")
    if limit is not None:
        rules.update(display="-webkit-box", overflow="hidden",
                     _webkit_box_orient="vertical",
                     _webkit_line_clamp=str(limit), line_clamp=str(limit))
    text = escape(n.text)
    return (f'<div class="nc-roles" title="{text}" data-line-limit="{limit}" '
            f'style="{_style(**rules)}">{text}</div>')


def _badge(n, config):
    style = _style(color=n.color, background=_tint(n.color),
                   border_radius="8px", padding="4px 8px",
                   font_size="12px", font_weight="bold", white_space="nowrap")
    return f'<span class="nc-badge" style="{style}">{escape(n.text)}</span>'


RENDERERS = {
    "screen": _screen,
    "section": _section,
    "heading": _heading,
    "caption": _caption,
    "scroll_row": _scroll_row,
    "card": _card,
    "icon": _icon,
    "title": _text("nc-name", font_weight="bold", font_size="17px"),
    "body": _text("nc-body", font_size="12px"),
    "footnote": _text("nc-footnote", font_size="11px", opacity="0.7",
                      padding_top="5px"),
    "pathway": _pathway,
    "stage": _stage,
    "subtitle": _text("nc-subtitle", font_size="12px"),
    "connector": _connector,
    "list": _list,
    "row": _row,
    "name": _text("nc-name", font_weight="bold", font_size="17px"),
    "roles": _roles,
    "badge": _badge,
}
"""Node kind -> HTML renderer."""


def to_html(n, config=None):
    """Render a Node (and its subtree) as an HTML fragment.

    Raises
    ------
    KeyError
        If the tree holds a kind with no renderer.
    """
    config = config or ScreenConfig()
    if n.kind not in RENDERERS:
        raise KeyError(
            f"No HTML renderer for node kind '{n.kind}'. "
            f"Available: {sorted(RENDERERS)}"
        )
    return RENDERERS[n.kind](n, config)


def render_page(catalog, config=None):
    """The whole screen as a standalone HTML document."""
    config = config or ScreenConfig()
    body = to_html(classification_screen(catalog, config), config)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(config.title)}</title>\n"
        "</head>\n"
        f'<body style="margin: 0">\n{body}\n</body>\n'
        "</html>\n"
    )


def save_page(path, catalog, config=None):
    """Write the screen to an HTML file. Returns the path."""
    path = Path(path)
    LOG.info("Writing classification page to %s", path)
    path.write_text(render_page(catalog, config), encoding="utf-8")
    return path
