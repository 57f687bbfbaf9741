"""
receptors
=========

Receptor-level impact of a single dose and the rules that translate an
impact into neurotransmitter changes.

``receptor_impacts`` scales each of a substance's declared interactions by
the dose's current effectiveness.  Interactions of the *same* substance on
the same receptor are summed and capped at 100.  There is deliberately no
cap across substances: two different active doses on one receptor each
contribute their own (capped) impact, and only the neurotransmitter level
clamp limits the combined result.

``INTERACTION_RULES`` maps each interaction type to the field it moves, the
factor applied to the impact, the bounds of that field and the status it
leaves behind:

==============  ===========  =======  =========  ================
type            field        factor   bounds     status
==============  ===========  =======  =========  ================
agonist         level        +0.3     0-100      enhanced
precursor       level        +0.3     0-100      enhanced
antagonist      level        -0.3     0-100      blocked
upregulation    sensitivity  +0.2     20-150     enhanced
downregulation  sensitivity  -0.2     20-150     falling
modulation      level        +0.15    0-100      enhanced if stable
==============  ===========  =======  =========  ================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Tuple

from ..models import InteractionType, Neurotransmitter, NTStatus, Receptor, Substance

MAX_IMPACT = 100.0
LEVEL_BOUNDS: Tuple[float, float] = (0.0, 100.0)
SENSITIVITY_BOUNDS: Tuple[float, float] = (20.0, 150.0)


@dataclass(frozen=True)
class InteractionRule:
    """How one interaction type mutates a snapshot."""

    target: Literal["level", "sensitivity"]
    factor: float
    status: NTStatus
    only_if_stable: bool = False

    @property
    def bounds(self) -> Tuple[float, float]:
        return LEVEL_BOUNDS if self.target == "level" else SENSITIVITY_BOUNDS


INTERACTION_RULES: Mapping[InteractionType, InteractionRule] = {
    InteractionType.AGONIST: InteractionRule("level", 0.3, NTStatus.ENHANCED),
    InteractionType.PRECURSOR: InteractionRule("level", 0.3, NTStatus.ENHANCED),
    InteractionType.ANTAGONIST: InteractionRule("level", -0.3, NTStatus.BLOCKED),
    InteractionType.UPREGULATION: InteractionRule("sensitivity", 0.2, NTStatus.ENHANCED),
    InteractionType.DOWNREGULATION: InteractionRule("sensitivity", -0.2, NTStatus.FALLING),
    InteractionType.MODULATION: InteractionRule("level", 0.15, NTStatus.ENHANCED, only_if_stable=True),
}


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def receptor_impacts(substance: Substance, effectiveness_percent: float) -> Dict[str, float]:
    """Return ``receptor_id -> magnitude`` for one dose of ``substance``.

    Parameters
    ----------
    substance:
        The substance whose declared interactions are scaled.
    effectiveness_percent:
        Current effectiveness of the dose, 0-100.

    Returns
    -------
    dict
        Per-receptor magnitudes in ``[0, 100]``, in declaration order.
    """

    impacts: Dict[str, float] = {}
    for interaction in substance.receptor_interactions:
        scaled = interaction.magnitude * effectiveness_percent / 100.0
        current = impacts.get(interaction.receptor_id, 0.0)
        impacts[interaction.receptor_id] = min(current + scaled, MAX_IMPACT)
    return impacts


def get_interaction_rule(interaction_type: InteractionType | str) -> InteractionRule:
    """Return the mutation rule for an interaction type.

    Raises
    ------
    ValueError
        If ``interaction_type`` is not a known interaction.
    """

    try:
        return INTERACTION_RULES[InteractionType(interaction_type)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unsupported interaction type '{interaction_type}'") from exc


def apply_impact(
    neurotransmitter: Neurotransmitter,
    receptor: Receptor,
    interaction_type: InteractionType,
    impact: float,
) -> None:
    """Apply one receptor impact to a snapshot in place, clamping immediately."""

    rule = get_interaction_rule(interaction_type)
    lower, upper = rule.bounds
    if rule.target == "level":
        neurotransmitter.current_level = clamp(neurotransmitter.current_level + impact * rule.factor, lower, upper)
    else:
        receptor.sensitivity = clamp(receptor.sensitivity + impact * rule.factor, lower, upper)
    if not rule.only_if_stable or neurotransmitter.status == NTStatus.STABLE:
        neurotransmitter.status = rule.status


__all__ = [
    "INTERACTION_RULES",
    "InteractionRule",
    "apply_impact",
    "clamp",
    "get_interaction_rule",
    "receptor_impacts",
]
