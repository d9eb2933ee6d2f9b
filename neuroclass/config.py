"""Screen configuration.

A ScreenConfig holds the few presentation knobs of the screen. It can be
built in code or loaded from YAML:

    title: Neuron Classification
    line_limit: 2
    card_width: 180
    card_height: 180
    theme: dark
"""

from dataclasses import dataclass, fields, asdict
from pathlib import Path

import yaml

from neuroclass.viz.palette import get_theme
from neuroclass.utils import get_logger

LOG = get_logger("config")


@dataclass(frozen=True)
class ScreenConfig:
    """Presentation settings for the classification screen.

    Parameters
    ----------
    title : str
        Navigation title shown above the sections.
    line_limit : int
        Lines of neurotransmitter role text shown before clipping.
    card_width, card_height : int
        Polarity card size in pixels.
    theme : str
        "light" or "dark".
    """
    title: str = "Neuron Classification"
    line_limit: int = 2
    card_width: int = 180
    card_height: int = 180
    theme: str = "light"

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError(f"title must be a non-empty string, got {self.title!r}")
        for name in ("line_limit", "card_width", "card_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        try:
            get_theme(self.theme)
        except KeyError as e:
            raise ValueError(e.args[0]) from None

    @property
    def colors(self):
        """The theme's surface and text colors."""
        return get_theme(self.theme)

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        """Build a config from a mapping; unknown keys are an error."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise KeyError(
                f"Unknown config keys: {unknown}. Available: {sorted(known)}"
            )
        return cls(**data)


def load_config(path):
    """Load a ScreenConfig from a YAML file. An empty file gives the defaults."""
    path = Path(path)
    LOG.info("Loading screen config from %s", path)
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a mapping, got {type(data).__name__}")
    return ScreenConfig.from_dict(data)


def save_config(config, path):
    """Write a ScreenConfig to a YAML file."""
    path = Path(path)
    LOG.info("Saving screen config to %s", path)
    with open(path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False)
    return path
