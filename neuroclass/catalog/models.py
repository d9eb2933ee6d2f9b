"""Records for the neuron classification catalog.

Three record types, one per section of the screen, plus the closed
enumeration of neurotransmitter functions. Records are frozen dataclasses:
once the catalog is built nothing in it changes.
"""

from dataclasses import dataclass
from enum import Enum

from neuroclass.viz.palette import RED, BLUE, PURPLE


# ---------------------------------------------------------------------------
# Neurotransmitter function — a closed set with a color per member
# ---------------------------------------------------------------------------

class NeurotransmitterFunction(Enum):
    """The functional role of a neurotransmitter."""
    EXCITATORY = "Excitatory"
    INHIBITORY = "Inhibitory"
    MODULATORY = "Modulatory"

    @property
    def label(self):
        """Display text for badges."""
        return self.value

    @property
    def color(self):
        """Display color for this function."""
        return FUNCTION_COLORS[self]


FUNCTION_COLORS = {
    NeurotransmitterFunction.EXCITATORY: RED,
    NeurotransmitterFunction.INHIBITORY: BLUE,
    NeurotransmitterFunction.MODULATORY: PURPLE,
}
"""Display color for each neurotransmitter function."""


def _check_exhaustive(mapping, enum_cls):
    """Fail at import if some member of `enum_cls` is missing from `mapping`."""
    missing = [m.name for m in enum_cls if m not in mapping]
    if missing:
        raise ValueError(
            f"{enum_cls.__name__} members without a color: {missing}"
        )


_check_exhaustive(FUNCTION_COLORS, NeurotransmitterFunction)


def _require_text(record, *fields):
    for name in fields:
        value = getattr(record, name)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(
                f"{record.__class__.__name__}.{name} must be a non-empty "
                f"string, got {value!r}"
            )


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PolarityType:
    """Structural class of a neuron, by the number of processes on its soma.

    Parameters
    ----------
    id : str
        Stable key, unique within the catalog.
    name : str
        Class name (e.g., "Bipolar").
    description : str
        What the class looks like.
    example : str
        Where such neurons are found.
    icon_name : str
        Symbol name, resolved by the host's icon table.
    """
    id: str
    name: str
    description: str
    example: str
    icon_name: str

    def __post_init__(self):
        _require_text(self, "id", "name", "description", "example", "icon_name")

    def to_dict(self):
        """Serialize to dict for export."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "example": self.example,
            "icon_name": self.icon_name,
        }


@dataclass(frozen=True)
class Neurotransmitter:
    """A chemical messenger and its primary function.

    `function` accepts either a NeurotransmitterFunction or its label
    ("Excitatory", ...); anything else is rejected when the record is built.
    """
    id: str
    name: str
    function: NeurotransmitterFunction
    key_roles: str
    icon_name: str

    def __post_init__(self):
        _require_text(self, "id", "name", "key_roles", "icon_name")
        if not isinstance(self.function, NeurotransmitterFunction):
            try:
                function = NeurotransmitterFunction(self.function)
            except ValueError:
                raise ValueError(
                    f"Unknown function {self.function!r} for '{self.name}'. "
                    f"Available: {[f.value for f in NeurotransmitterFunction]}"
                ) from None
            object.__setattr__(self, "function", function)

    @property
    def color(self):
        return self.function.color

    def to_dict(self):
        """Serialize to dict for export."""
        return {
            "id": self.id,
            "name": self.name,
            "function": self.function.label,
            "key_roles": self.key_roles,
            "icon_name": self.icon_name,
        }


@dataclass(frozen=True)
class PathwayStage:
    """One stage of the signal pathway from stimulus to effector."""
    id: str
    icon_name: str
    title: str
    subtitle: str
    color: str

    def __post_init__(self):
        _require_text(self, "id", "icon_name", "title", "subtitle", "color")

    def to_dict(self):
        return {
            "id": self.id,
            "icon_name": self.icon_name,
            "title": self.title,
            "subtitle": self.subtitle,
            "color": self.color,
        }
