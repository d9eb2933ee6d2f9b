"""neuroclass — Neuron classification facts, as a static screen.

Three fixed tables (structural polarity, signal direction, neurotransmitter
function) rendered into cards, a pathway diagram and badge rows.

Subpackages:
    catalog   The classification tables and the NeurotransmitterFunction set
    render    Pure catalog -> render tree builders, and an HTML renderer
    portal    The screen as a Panel application
    viz       Named colors, themes and icon glyphs
    utils     Print-based logging
"""

__version__ = "0.1.0"
