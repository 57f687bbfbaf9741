"""Full neurochemical snapshot recompute.

A snapshot is rebuilt from nothing on every call: circadian baselines first,
then every active dose applied in the order it was logged.  Clamping and
status assignment happen per step, so log order matters.  Nothing survives
from one call to the next and the inputs are never mutated.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..catalog import DEFAULT_CATALOG, SubstanceCatalog
from ..config import DEFAULT_ENGINE_SETTINGS
from ..models import (
    Neurotransmitter,
    NeurotransmitterSystem,
    NTStatus,
    Receptor,
    StatusEffect,
    Substance,
    SubstanceLog,
)
from ..telemetry import get_tracer
from .kinetics import effectiveness
from .receptors import apply_impact, receptor_impacts

LOGGER = logging.getLogger(__name__)


def baseline_snapshot(systems: Sequence[NeurotransmitterSystem], hour_of_day: float) -> List[Neurotransmitter]:
    """Return fresh neurotransmitter states at their circadian baseline."""

    snapshot: List[Neurotransmitter] = []
    for system in systems:
        level = system.circadian_level(hour_of_day)
        receptors = []
        for site in system.receptors:
            ratio = site.baseline_occupancy / system.baseline_level if system.baseline_level else 0.0
            receptors.append(
                Receptor(
                    id=site.id,
                    subtype=site.subtype,
                    label=site.label,
                    sensitivity=100.0,
                    occupancy=max(0.0, min(100.0, level * ratio)),
                    status_effects=[],
                )
            )
        snapshot.append(
            Neurotransmitter(
                id=system.id,
                name=system.name,
                abbreviation=system.abbreviation,
                baseline_level=system.baseline_level,
                current_level=level,
                status=NTStatus.STABLE,
                receptors=receptors,
            )
        )
    return snapshot


def active_logs(log_history: Sequence[SubstanceLog], now: float) -> List[SubstanceLog]:
    """Return the logs whose frozen clearance horizon lies after ``now``, in log order."""

    return [log for log in log_history if log.expected_clearance > now]


class NeurochemicalStateEngine:
    """Rebuild neurotransmitter snapshots from a catalog and a log history."""

    def __init__(
        self,
        catalog: SubstanceCatalog | None = None,
        *,
        effectiveness_floor: Optional[float] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        if effectiveness_floor is None:
            effectiveness_floor = DEFAULT_ENGINE_SETTINGS.effectiveness_floor
        self.effectiveness_floor = float(effectiveness_floor)

    def recompute(
        self,
        now: float,
        hour_of_day: float,
        log_history: Sequence[SubstanceLog],
    ) -> List[Neurotransmitter]:
        """Return the snapshot of every neurotransmitter system at ``now``.

        Identical arguments always produce identical snapshots.
        """

        tracer = get_tracer()
        with tracer.start_as_current_span("neurostate.recompute") as span:
            snapshot = baseline_snapshot(self.catalog.systems, hour_of_day)
            active = active_logs(log_history, now)
            applied = 0
            for log in active:
                substance = self.catalog.get(log.substance_id)
                if substance is None:
                    LOGGER.debug("Skipping log %s for unknown substance %s", log.id, log.substance_id)
                    continue
                level = effectiveness(log, substance, now)
                if level < self.effectiveness_floor:
                    LOGGER.debug("Skipping log %s: effectiveness %.3f below floor", log.id, level)
                    continue
                self._apply(snapshot, log, substance, level)
                applied += 1
            span.set_attribute("neurostate.logs.total", len(log_history))
            span.set_attribute("neurostate.logs.active", len(active))
            span.set_attribute("neurostate.logs.applied", applied)
        return snapshot

    @staticmethod
    def _apply(
        snapshot: List[Neurotransmitter],
        log: SubstanceLog,
        substance: Substance,
        level: float,
    ) -> None:
        impacts = receptor_impacts(substance, level)
        for neurotransmitter in snapshot:
            for receptor in neurotransmitter.receptors:
                impact = impacts.get(receptor.id)
                if not impact:
                    continue
                interaction = substance.interaction_for(receptor.id)
                if interaction is None:  # pragma: no cover - impacts only list declared receptors
                    continue
                receptor.status_effects.append(
                    StatusEffect(
                        type=interaction.type,
                        source=substance.name,
                        magnitude=impact,
                        start_time=log.timestamp,
                    )
                )
                apply_impact(neurotransmitter, receptor, interaction.type, impact)


DEFAULT_ENGINE = NeurochemicalStateEngine()


def recompute(
    now: float,
    hour_of_day: float,
    log_history: Sequence[SubstanceLog],
    catalog: SubstanceCatalog | None = None,
) -> List[Neurotransmitter]:
    """Rebuild the neurotransmitter snapshot using ``catalog`` (default catalog when omitted)."""

    engine = DEFAULT_ENGINE if catalog is None else NeurochemicalStateEngine(catalog)
    return engine.recompute(now, hour_of_day, log_history)


__all__ = [
    "DEFAULT_ENGINE",
    "NeurochemicalStateEngine",
    "active_logs",
    "baseline_snapshot",
    "recompute",
]
