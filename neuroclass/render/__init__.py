"""render — Catalog to render tree, render tree to HTML.

Section builders are pure: the same catalog and config always give equal
trees. Hosts (HTML here, Panel in `neuroclass.portal`) only draw them.
"""

from .tree import Node, node, walk, find_all, texts, to_dict
from .sections import (
    polarity_card,
    structural_section,
    pathway_stage,
    connector,
    functional_section,
    function_badge,
    neurotransmitter_row,
    neurotransmitter_section,
    classification_screen,
)
from .markup import to_html, render_page, save_page
