"""Core data models for the neurochemical simulation.

Two families of types live here.  Catalog definitions (``Substance``,
``NeurotransmitterSystem`` and friends) are immutable and loaded once.
Snapshot types (``Neurotransmitter``, ``Receptor``, ``StatusEffect``) are
built from scratch by every recompute and never carried between calls.
``SubstanceLog`` is the record handed over by the persistence layer and is
validated with pydantic at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class InteractionType(str, Enum):
    """Ways a substance can act on a receptor."""

    AGONIST = "agonist"
    ANTAGONIST = "antagonist"
    UPREGULATION = "upregulation"
    DOWNREGULATION = "downregulation"
    MODULATION = "modulation"
    PRECURSOR = "precursor"


class NTStatus(str, Enum):
    """Display status of a neurotransmitter system."""

    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"
    BLOCKED = "blocked"
    ENHANCED = "enhanced"


class SubstanceCategory(str, Enum):
    STIMULANT = "Stimulant"
    NOOTROPIC = "Nootropic"
    DEPRESSANT = "Depressant"
    SUPPLEMENT = "Supplement"
    PSYCHEDELIC = "Psychedelic"


@dataclass(frozen=True)
class Kinetics:
    """Resolved kinetic parameters for one dose.

    ``half_life`` and ``duration`` are in hours, ``onset_time`` and
    ``peak_time`` in minutes.  ``onset_time`` is advisory metadata: the
    effectiveness curve only depends on ``peak_time`` and ``half_life``.
    """

    half_life: float
    onset_time: float
    peak_time: float
    duration: float
    tolerance_rate: float


@dataclass(frozen=True)
class Constant:
    """Calibration field that does not vary with dose."""

    value: float


@dataclass(frozen=True)
class Anchors:
    """Linear calibration between two anchor doses.

    Doses outside ``[low_dose, high_dose]`` are extrapolated along the same
    line.  ``precision`` optionally rounds the resolved value to that many
    decimal places.
    """

    low_dose: float
    low_value: float
    high_dose: float
    high_value: float
    precision: Optional[int] = None

    def __post_init__(self) -> None:
        if self.high_dose == self.low_dose:
            raise ValueError("calibration anchors must use two distinct doses")

    def covers(self, dose: float) -> bool:
        low, high = sorted((self.low_dose, self.high_dose))
        return low <= dose <= high


@dataclass(frozen=True)
class Scaled:
    """Calibration field derived from another, already resolved field.

    ``source`` names a :class:`Kinetics` field whose resolved (and rounded)
    value is multiplied by ``factor``.  The source itself must not be derived.
    """

    source: str
    factor: float
    precision: Optional[int] = None


FieldCalibration = Union[Constant, Anchors, Scaled]


@dataclass(frozen=True)
class Calibration:
    """Declarative dose calibration, one entry per :class:`Kinetics` field."""

    half_life: FieldCalibration
    onset_time: FieldCalibration
    peak_time: FieldCalibration
    duration: FieldCalibration
    tolerance_rate: FieldCalibration

    FIELDS = ("half_life", "onset_time", "peak_time", "duration", "tolerance_rate")

    def __post_init__(self) -> None:
        for name, entry in self.items():
            if not isinstance(entry, Scaled):
                continue
            if entry.source not in self.FIELDS:
                raise ValueError(f"{name} is scaled from unknown field '{entry.source}'")
            if isinstance(getattr(self, entry.source), Scaled):
                raise ValueError(f"{name} is scaled from '{entry.source}', which is itself derived")

    def items(self) -> Tuple[Tuple[str, FieldCalibration], ...]:
        return tuple((name, getattr(self, name)) for name in self.FIELDS)


@dataclass(frozen=True)
class ReceptorInteraction:
    """Declared effect of a substance on one receptor."""

    receptor_id: str
    neurotransmitter_id: str
    type: InteractionType
    magnitude: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.magnitude <= 100.0:
            raise ValueError(
                f"interaction magnitude for '{self.receptor_id}' must lie in [0, 100], got {self.magnitude}"
            )


@dataclass(frozen=True)
class Substance:
    """Catalog entry for a loggable substance."""

    id: str
    name: str
    category: SubstanceCategory
    dosage_unit: str
    common_doses: Tuple[float, ...]
    default_kinetics: Kinetics
    calibration: Calibration
    receptor_interactions: Tuple[ReceptorInteraction, ...]
    description: str = ""
    mechanism: str = ""

    def interaction_for(self, receptor_id: str) -> Optional[ReceptorInteraction]:
        """Return the first declared interaction targeting ``receptor_id``."""

        for interaction in self.receptor_interactions:
            if interaction.receptor_id == receptor_id:
                return interaction
        return None


@dataclass(frozen=True)
class ReceptorSite:
    """Catalog definition of a receptor owned by a neurotransmitter system."""

    id: str
    subtype: str
    label: str
    baseline_occupancy: float


@dataclass(frozen=True)
class NeurotransmitterSystem:
    """Catalog definition of a neurotransmitter system and its rhythm."""

    id: str
    name: str
    abbreviation: str
    description: str
    baseline_level: float
    receptors: Tuple[ReceptorSite, ...]
    circadian: Callable[[float], float] = field(compare=False)

    def circadian_level(self, hour_of_day: float) -> float:
        """Return the expected level for ``hour_of_day`` with no substances active."""

        level = float(self.circadian(float(hour_of_day) % 24.0))
        return max(0.0, min(100.0, level))


@dataclass(slots=True)
class StatusEffect:
    """Audit record of one substance's contribution to a receptor."""

    type: InteractionType
    source: str
    magnitude: float
    start_time: float


@dataclass(slots=True)
class Receptor:
    """Receptor state inside a snapshot."""

    id: str
    subtype: str
    label: str
    sensitivity: float = 100.0
    occupancy: float = 0.0
    status_effects: List[StatusEffect] = field(default_factory=list)


@dataclass(slots=True)
class Neurotransmitter:
    """Neurotransmitter state inside a snapshot."""

    id: str
    name: str
    abbreviation: str
    baseline_level: float
    current_level: float
    status: NTStatus = NTStatus.STABLE
    receptors: List[Receptor] = field(default_factory=list)

    def receptor(self, receptor_id: str) -> Optional[Receptor]:
        for receptor in self.receptors:
            if receptor.id == receptor_id:
                return receptor
        return None


class SubstanceLog(BaseModel):
    """One logged dose.

    Timestamps are epoch milliseconds.  ``expected_clearance`` is computed
    once when the dose is logged and frozen with the record.  The camelCase
    names used by the persistence layer (``substanceId``,
    ``expectedClearance``) are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1)
    substance_id: str = Field(..., min_length=1)
    dosage: float = Field(..., gt=0, allow_inf_nan=False)
    timestamp: float = Field(..., allow_inf_nan=False)
    expected_clearance: float = Field(..., allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_clearance(self) -> "SubstanceLog":
        if self.expected_clearance <= self.timestamp:
            raise ValueError("expected_clearance must be later than timestamp")
        return self


__all__ = [
    "Anchors",
    "Calibration",
    "Constant",
    "FieldCalibration",
    "InteractionType",
    "Kinetics",
    "NTStatus",
    "Neurotransmitter",
    "NeurotransmitterSystem",
    "Receptor",
    "ReceptorInteraction",
    "ReceptorSite",
    "Scaled",
    "StatusEffect",
    "Substance",
    "SubstanceCategory",
    "SubstanceLog",
]
