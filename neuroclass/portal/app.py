"""Assemble the Neuron Classification screen.

Usage:
    # In a notebook
    from neuroclass.portal.app import build_screen
    screen = build_screen()
    screen.servable()

    # As a standalone app
    panel serve neuroclass/portal/app.py --show

    # With a YAML config
    NEUROCLASS_CONFIG=screen.yaml panel serve neuroclass/portal/app.py
"""

import os

import panel as pn

from neuroclass.catalog import Catalog
from neuroclass.config import ScreenConfig, load_config
from neuroclass.render import classification_screen
from neuroclass.utils import get_logger

LOG = get_logger("portal.app")

CONFIG_ENV = "NEUROCLASS_CONFIG"


def build_screen(catalog=None, config=None):
    """Build the complete classification screen.

    Parameters
    ----------
    catalog : Catalog, optional
        The data to show. If None, uses Catalog.default().
    config : ScreenConfig, optional
        Presentation settings. If None, uses the defaults.

    Returns
    -------
    pn.Column
        The screen, ready for .servable() or .show().
    """
    pn.extension(sizing_mode="stretch_width")

    from neuroclass.portal.views import to_panel

    catalog = catalog or Catalog.default()
    config = config or ScreenConfig()
    LOG.info("Building '%s' screen (%s theme)\n%s",
             config.title, config.theme, catalog.summary())

    screen = to_panel(classification_screen(catalog, config), config)

    LOG.info("Screen built: %d sections", len(screen.objects) - 1)
    return screen


def _config_from_env():
    """Load the config named by $NEUROCLASS_CONFIG, if set."""
    path = os.environ.get(CONFIG_ENV)
    if not path:
        return None
    return load_config(path)


# --- Standalone entry point ---
if __name__ == "__main__" or __name__.startswith("bokeh"):
    screen = build_screen(config=_config_from_env())
    screen.servable()
