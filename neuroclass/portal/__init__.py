"""portal — The classification screen as a Panel application.

Launch with:
    panel serve neuroclass/portal/app.py
or in a notebook:
    from neuroclass.portal.app import build_screen
    screen = build_screen()
    screen.servable()

Requires: panel >= 1.0
"""

from .views import (
    to_panel,
    structural_view,
    functional_view,
    neurotransmitter_view,
)
from .app import build_screen
