"""Neurotransmitter systems and their circadian baselines.

Rhythms are simplified piecewise curves over hour-of-day.  They assume a
07:00 wake and a 23:00 sleep time.
"""

from __future__ import annotations

from typing import Tuple

from ..models import NeurotransmitterSystem, ReceptorSite


def adenosine_rhythm(hour: float) -> float:
    """Sleep pressure accumulates ~5.6 points per waking hour and clears overnight."""

    if hour >= 23 or hour < 7:
        return 10.0
    return min(10.0 + (hour - 7) * 5.6, 100.0)


def dopamine_rhythm(hour: float) -> float:
    if hour >= 23 or hour < 7:
        return 40.0
    if hour < 10:
        return 40.0 + ((hour - 7) / 3) * 30
    if hour < 14:
        return 70.0
    if hour < 18:
        return 70.0 - ((hour - 14) / 4) * 20
    return 50.0 - ((hour - 18) / 5) * 10


def serotonin_rhythm(hour: float) -> float:
    """Tracks daylight: rises with the sun, falls at night."""

    if hour >= 22 or hour < 6:
        return 35.0
    if hour < 12:
        return 35.0 + ((hour - 6) / 6) * 35
    if hour < 16:
        return 70.0
    return 70.0 - ((hour - 16) / 6) * 35


def gaba_rhythm(hour: float) -> float:
    if hour >= 22 or hour < 6:
        return 75.0
    if hour < 10:
        return 75.0 - ((hour - 6) / 4) * 30
    if hour < 18:
        return 45.0
    return 45.0 + ((hour - 18) / 4) * 30


NEUROTRANSMITTER_SYSTEMS: Tuple[NeurotransmitterSystem, ...] = (
    NeurotransmitterSystem(
        id="adenosine",
        name="Adenosine",
        abbreviation="ADO",
        description="Sleep pressure molecule. Accumulates during wakefulness, cleared during sleep.",
        baseline_level=20.0,
        receptors=(
            ReceptorSite("a1", "A1", "A1 (Sleep Pressure)", 20.0),
            ReceptorSite("a2a", "A2A", "A2A (Alertness)", 20.0),
        ),
        circadian=adenosine_rhythm,
    ),
    NeurotransmitterSystem(
        id="dopamine",
        name="Dopamine",
        abbreviation="DA",
        description="Motivation, reward, and pleasure. Drives goal-directed behavior.",
        baseline_level=60.0,
        receptors=(
            ReceptorSite("d1", "D1", "D1 (Motivation)", 50.0),
            ReceptorSite("d2", "D2", "D2 (Reward)", 50.0),
        ),
        circadian=dopamine_rhythm,
    ),
    NeurotransmitterSystem(
        id="serotonin",
        name="Serotonin",
        abbreviation="5-HT",
        description="Mood regulation, wellbeing, and social behavior. Light-dependent.",
        baseline_level=55.0,
        receptors=(
            ReceptorSite("5ht1a", "5-HT1A", "5-HT1A (Mood)", 50.0),
            ReceptorSite("5ht2a", "5-HT2A", "5-HT2A (Perception)", 50.0),
        ),
        circadian=serotonin_rhythm,
    ),
    NeurotransmitterSystem(
        id="gaba",
        name="GABA",
        abbreviation="GABA",
        description="Primary inhibitory neurotransmitter. Promotes calm, reduces anxiety.",
        baseline_level=50.0,
        receptors=(
            ReceptorSite("gabaa", "GABA-A", "GABA-A (Fast Inhibition)", 50.0),
            ReceptorSite("gabab", "GABA-B", "GABA-B (Slow Inhibition)", 50.0),
        ),
        circadian=gaba_rhythm,
    ),
)


__all__ = [
    "NEUROTRANSMITTER_SYSTEMS",
    "adenosine_rhythm",
    "dopamine_rhythm",
    "gaba_rhythm",
    "serotonin_rhythm",
]
