"""Dose logging and a reference caller-side state holder.

:func:`create_log` is the only place a :class:`~neurostate.models.SubstanceLog`
gets its clearance horizon: it is computed once from the dose-specific
half-life and frozen on the record.

:class:`NeuroSession` shows how an application owns the log history and
drives the pure engine.  Mutations and recomputes are serialised by one lock,
and repeated refresh triggers for an unchanged history, time and hour are
coalesced into the cached snapshot.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import List, Optional, Sequence, Tuple
import uuid

from .catalog import DEFAULT_CATALOG, SubstanceCatalog
from .config import DEFAULT_ENGINE_SETTINGS
from .engine import clock
from .engine.kinetics import clearance_timestamp
from .engine.resolver import is_extrapolated, resolve
from .engine.state import NeurochemicalStateEngine
from .engine.usage import tolerance
from .models import Neurotransmitter, Substance, SubstanceLog

LOGGER = logging.getLogger(__name__)


class InvalidLogError(ValueError):
    """Raised when a dose cannot be turned into a valid log entry."""


def create_log(
    substance: Substance,
    dosage: float,
    logged_at: float,
    log_id: Optional[str] = None,
) -> SubstanceLog:
    """Return a new log for ``dosage`` of ``substance`` taken at ``logged_at`` (epoch ms).

    Raises
    ------
    InvalidLogError
        If the dosage is not positive or the resolved half-life is not.
    pydantic.ValidationError
        If the remaining fields are malformed.
    """

    if not dosage > 0:
        raise InvalidLogError(f"dosage must be positive, got {dosage}")
    kinetics = resolve(substance, dosage)
    if not kinetics.half_life > 0:
        raise InvalidLogError(
            f"{substance.id} at {dosage}{substance.dosage_unit} resolves to a non-positive half-life ({kinetics.half_life})"
        )
    if is_extrapolated(substance, dosage):
        LOGGER.warning(
            "Dose %s%s of %s lies outside its calibration range; kinetics are extrapolated",
            dosage,
            substance.dosage_unit,
            substance.id,
        )
    return SubstanceLog(
        id=log_id or uuid.uuid4().hex,
        substance_id=substance.id,
        dosage=dosage,
        timestamp=logged_at,
        expected_clearance=clearance_timestamp(substance, dosage, logged_at),
    )


class NeuroSession:
    """Owns a log history and the latest snapshot built from it."""

    def __init__(
        self,
        catalog: SubstanceCatalog | None = None,
        logs: Sequence[SubstanceLog] = (),
    ) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._engine = NeurochemicalStateEngine(self.catalog)
        self._lock = threading.Lock()
        self._logs: List[SubstanceLog] = list(logs)
        self._revision = 0
        self._cache_key: Optional[Tuple[int, float, float]] = None
        self._snapshot: List[Neurotransmitter] = []

    @property
    def logs(self) -> Tuple[SubstanceLog, ...]:
        with self._lock:
            return tuple(self._logs)

    def log_substance(self, substance_id: str, dosage: float, now: float) -> SubstanceLog:
        """Log a dose taken at ``now``; unknown substances raise ``UnknownSubstanceError``."""

        substance = self.catalog.require(substance_id)
        entry = create_log(substance, dosage, now)
        with self._lock:
            self._logs.append(entry)
            self._revision += 1
        LOGGER.debug("Logged %s%s of %s as %s", dosage, substance.dosage_unit, substance_id, entry.id)
        return entry

    def remove_log(self, log_id: str) -> bool:
        with self._lock:
            remaining = [entry for entry in self._logs if entry.id != log_id]
            removed = len(remaining) != len(self._logs)
            if removed:
                self._logs = remaining
                self._revision += 1
        return removed

    def clear_logs(self) -> None:
        with self._lock:
            self._logs = []
            self._revision += 1

    def refresh(self, now: float, hour_of_day: Optional[float] = None) -> List[Neurotransmitter]:
        """Return the snapshot at ``now``, recomputing only when an input changed.

        ``hour_of_day`` defaults to the local hour of ``now`` in the configured
        time zone.

        The caller receives its own copy; mutating it does not affect later
        refreshes.
        """

        if hour_of_day is None:
            hour_of_day = clock.hour_of_day(now, DEFAULT_ENGINE_SETTINGS.tzinfo())
        with self._lock:
            key = (self._revision, float(now), float(hour_of_day))
            if key != self._cache_key:
                self._snapshot = self._engine.recompute(now, hour_of_day, tuple(self._logs))
                self._cache_key = key
            return copy.deepcopy(self._snapshot)

    def tolerance(self, substance_id: str, now: float) -> float:
        substance = self.catalog.require(substance_id)
        return tolerance(self.logs, substance, now)


__all__ = ["InvalidLogError", "NeuroSession", "create_log"]
