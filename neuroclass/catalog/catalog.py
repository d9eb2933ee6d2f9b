"""The literal classification tables and the Catalog that holds them.

The three tables below are the whole data source of the screen. They are
plain module constants; a Catalog bundles them into one explicitly passed
object so views never reach for shared state.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from neuroclass.catalog.models import (
    NeurotransmitterFunction,
    PolarityType,
    Neurotransmitter,
    PathwayStage,
)
from neuroclass.viz.palette import GREEN, BLUE, ORANGE, PURPLE, RED
from neuroclass.utils import get_logger

LOG = get_logger("catalog")

EXCITATORY = NeurotransmitterFunction.EXCITATORY
INHIBITORY = NeurotransmitterFunction.INHIBITORY
MODULATORY = NeurotransmitterFunction.MODULATORY

PATHWAY_LENGTH = 5


# ---------------------------------------------------------------------------
# Structural classification (by polarity)
# ---------------------------------------------------------------------------

POLARITY_TYPES = (
    PolarityType(
        id="multipolar",
        name="Multipolar",
        description="One axon and many dendrites.",
        example="Most common type in the CNS (e.g., motor neurons).",
        icon_name="arrow.up.and.down.and.arrow.left.and.right",
    ),
    PolarityType(
        id="bipolar",
        name="Bipolar",
        description="One axon and one dendrite.",
        example="Found in retina, olfactory system.",
        icon_name="arrow.up.and.down",
    ),
    PolarityType(
        id="unipolar",
        name="Unipolar",
        description="Single process emerges from soma.",
        example="Primarily sensory neurons (e.g., dorsal root ganglia).",
        icon_name="arrow.up",
    ),
    PolarityType(
        id="anaxonic",
        name="Anaxonic",
        description="Axon is indistinguishable from dendrites.",
        example="Found in the brain and retina.",
        icon_name="circle.grid.3x3.fill",
    ),
)


# ---------------------------------------------------------------------------
# Classification by neurotransmitter
# ---------------------------------------------------------------------------

NEUROTRANSMITTERS = (
    Neurotransmitter(
        id="glutamate",
        name="Glutamate",
        function=EXCITATORY,
        key_roles="The primary excitatory neurotransmitter; crucial for "
                  "learning and memory.",
        icon_name="brain.head.profile",
    ),
    Neurotransmitter(
        id="gaba",
        name="GABA",
        function=INHIBITORY,
        key_roles="The primary inhibitory neurotransmitter; reduces neuronal "
                  "excitability throughout the brain.",
        icon_name="bed.double.fill",
    ),
    Neurotransmitter(
        id="dopamine",
        name="Dopamine",
        function=MODULATORY,
        key_roles="Controls reward, motivation, and motor control. "
                  "Implicated in Parkinson's disease.",
        icon_name="smiley.fill",
    ),
    Neurotransmitter(
        id="serotonin",
        name="Serotonin",
        function=MODULATORY,
        key_roles="Regulates mood, appetite, and sleep. Targeted by many "
                  "antidepressants.",
        icon_name="dial.medium.fill",
    ),
    Neurotransmitter(
        id="acetylcholine",
        name="Acetylcholine",
        function=EXCITATORY,
        key_roles="Activates muscles at the neuromuscular junction; also "
                  "involved in memory.",
        icon_name="figure.run",
    ),
    Neurotransmitter(
        id="noradrenaline",
        name="Noradrenaline",
        function=EXCITATORY,
        key_roles="Governs arousal, alertness, and the 'fight-or-flight' "
                  "response.",
        icon_name="bolt.fill",
    ),
)


# ---------------------------------------------------------------------------
# Functional classification (by signal direction), in signal-flow order
# ---------------------------------------------------------------------------

PATHWAY_STAGES = (
    PathwayStage(
        id="stimulus",
        icon_name="sensor.tag.fill",
        title="Stimulus",
        subtitle="(Light, Sound, Touch)",
        color=GREEN,
    ),
    PathwayStage(
        id="afferent",
        icon_name="wave.3.right.circle.fill",
        title="Afferent (Sensory) Neuron",
        subtitle="Transmits signal towards CNS",
        color=BLUE,
    ),
    PathwayStage(
        id="interneuron",
        icon_name="link.circle.fill",
        title="Interneuron",
        subtitle="Connects neurons within CNS",
        color=ORANGE,
    ),
    PathwayStage(
        id="efferent",
        icon_name="wave.3.left.circle.fill",
        title="Efferent (Motor) Neuron",
        subtitle="Transmits signal away from CNS",
        color=PURPLE,
    ),
    PathwayStage(
        id="effector",
        icon_name="figure.walk.motion",
        title="Effector",
        subtitle="(Muscle or Gland)",
        color=RED,
    ),
)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def _check_unique_ids(records, what):
    counts = Counter(r.id for r in records)
    duplicated = sorted(i for i, n in counts.items() if n > 1)
    if duplicated:
        raise ValueError(f"Duplicate {what} ids: {duplicated}")


@dataclass(frozen=True)
class Catalog:
    """The screen's data source: three ordered, read-only tables.

    Sequences are stored as tuples, so iterating twice yields the same
    records in the same order. Validation happens here, once; rendering
    never has to handle a malformed catalog.

    Parameters
    ----------
    polarity_types : sequence of PolarityType
    neurotransmitters : sequence of Neurotransmitter
    pathway : sequence of PathwayStage
        Exactly five stages, in signal-flow order.
    """
    polarity_types: Tuple[PolarityType, ...] = POLARITY_TYPES
    neurotransmitters: Tuple[Neurotransmitter, ...] = NEUROTRANSMITTERS
    pathway: Tuple[PathwayStage, ...] = PATHWAY_STAGES

    SECTIONS = ("polarity", "neurotransmitters", "pathway")

    def __post_init__(self):
        for attr, record_cls in (("polarity_types", PolarityType),
                                 ("neurotransmitters", Neurotransmitter),
                                 ("pathway", PathwayStage)):
            records = tuple(getattr(self, attr))
            if not records:
                raise ValueError(f"Catalog.{attr} must not be empty")
            for record in records:
                if not isinstance(record, record_cls):
                    raise ValueError(
                        f"Catalog.{attr} expects {record_cls.__name__}, "
                        f"got {type(record).__name__}"
                    )
            _check_unique_ids(records, attr)
            object.__setattr__(self, attr, records)

        if len(self.pathway) != PATHWAY_LENGTH:
            raise ValueError(
                f"Pathway must have exactly {PATHWAY_LENGTH} stages, "
                f"got {len(self.pathway)}"
            )
        LOG.debug("Catalog: %d polarity types, %d neurotransmitters, "
                  "%d pathway stages", len(self.polarity_types),
                  len(self.neurotransmitters), len(self.pathway))

    @classmethod
    def default(cls):
        """The catalog shown on the Neuron Classification screen."""
        return cls(
            polarity_types=POLARITY_TYPES,
            neurotransmitters=NEUROTRANSMITTERS,
            pathway=PATHWAY_STAGES,
        )

    def _section(self, section):
        tables = {
            "polarity": self.polarity_types,
            "neurotransmitters": self.neurotransmitters,
            "pathway": self.pathway,
        }
        if section not in tables:
            raise KeyError(
                f"Unknown section '{section}'. Available: {list(self.SECTIONS)}"
            )
        return tables[section]

    def records(self, section):
        """One section of the catalog as a list of dicts."""
        return [r.to_dict() for r in self._section(section)]

    def to_dataframe(self, section):
        """One section of the catalog as a DataFrame, in catalog order."""
        return pd.DataFrame(self.records(section))

    def by_function(self, function):
        """Neurotransmitters with the given function, in catalog order.

        Parameters
        ----------
        function : NeurotransmitterFunction or str
            A member or its label (e.g., "Modulatory").
        """
        function = NeurotransmitterFunction(function)
        return [nt for nt in self.neurotransmitters if nt.function is function]

    def summary(self):
        """Human-readable summary of the catalog contents."""
        counts = Counter(nt.function for nt in self.neurotransmitters)
        by_function = ", ".join(
            f"{f.label}: {counts.get(f, 0)}" for f in NeurotransmitterFunction
        )
        lines = [
            f"Polarity types: {len(self.polarity_types)} "
            f"({', '.join(p.name for p in self.polarity_types)})",
            f"Neurotransmitters: {len(self.neurotransmitters)} ({by_function})",
            f"Pathway: {' -> '.join(s.id for s in self.pathway)}",
        ]
        return "\n".join(lines)
