"""catalog — The neuron classification tables.

Three fixed tables (polarity types, neurotransmitters, pathway stages)
built from literal data, plus the closed NeurotransmitterFunction set and
its colors.
"""

from .models import (
    NeurotransmitterFunction,
    FUNCTION_COLORS,
    PolarityType,
    Neurotransmitter,
    PathwayStage,
)
from .catalog import (
    Catalog,
    POLARITY_TYPES,
    NEUROTRANSMITTERS,
    PATHWAY_STAGES,
)
