"""A minimal render tree.

Views in neuroclass are pure functions from catalog to Node. A Node is a
frozen record: a layout kind, optional text/icon/color, a few extra
properties, and child nodes. Two renders of the same catalog compare
equal, and a host (HTML, Panel) walks the tree to draw it.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Node:
    """One element of the render tree.

    Parameters
    ----------
    kind : str
        Layout or element kind (e.g., "card", "badge", "connector").
    text : str, optional
        Text content, never truncated here.
    icon : str, optional
        Opaque symbol name.
    color : str, optional
        Foreground color as a hex string.
    props : tuple of (str, value) pairs
        Extra presentation properties, sorted by name.
    children : tuple of Node
    """
    kind: str
    text: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    props: Tuple[Tuple[str, Any], ...] = ()
    children: Tuple["Node", ...] = ()

    def prop(self, name, default=None):
        """Look up an extra property by name."""
        for key, value in self.props:
            if key == name:
                return value
        return default

    @property
    def key(self):
        """Stable rendering key, if the node was given one."""
        return self.prop("key")


def node(kind, *children, text=None, icon=None, color=None, **props):
    """Build a Node; keyword arguments beyond the core fields become props."""
    return Node(
        kind=kind,
        text=text,
        icon=icon,
        color=color,
        props=tuple(sorted(props.items())),
        children=tuple(children),
    )


def walk(root):
    """Yield every node of the tree, depth-first, parents before children."""
    yield root
    for child in root.children:
        yield from walk(child)


def find_all(root, kind):
    """All nodes of a given kind, in document order."""
    return [n for n in walk(root) if n.kind == kind]


def texts(root):
    """All text content of the tree, in document order."""
    return [n.text for n in walk(root) if n.text is not None]


def to_dict(root):
    """Convert a tree to nested plain dicts (for JSON export or inspection)."""
    d = {"kind": root.kind}
    for field in ("text", "icon", "color"):
        value = getattr(root, field)
        if value is not None:
            d[field] = value
    if root.props:
        d["props"] = dict(root.props)
    if root.children:
        d["children"] = [to_dict(c) for c in root.children]
    return d
