"""Single-dose kinetics.

Every dose follows a two-phase curve: a quarter-sine ramp from 0 to 100 over
``peak_time`` minutes, then first-order decay from 100 with the dose's
half-life.  Both phases equal exactly 100 at the peak boundary.  All times
crossing the public API are epoch milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterator, NamedTuple, Optional, Tuple

import numpy as np
import numpy.typing as npt

from ..config import DEFAULT_ENGINE_SETTINGS
from ..models import Kinetics, Substance, SubstanceLog
from .resolver import resolve

MS_PER_MINUTE = 60_000.0
MS_PER_HOUR = 3_600_000.0

# ~4.3 half-lives leave less than 5% of the dose.
CLEARANCE_HALF_LIVES = 4.3


def decay(amount: float, half_life_hours: float, elapsed_hours: float) -> float:
    """Return the amount remaining after ``elapsed_hours`` of first-order decay."""

    if elapsed_hours < 0:
        return 0.0
    return amount * 0.5 ** (elapsed_hours / half_life_hours)


def effectiveness_at(kinetics: Kinetics, elapsed_minutes: float) -> float:
    """Return effectiveness (0-100) ``elapsed_minutes`` after a dose with ``kinetics``."""

    if elapsed_minutes < 0:
        return 0.0
    peak = kinetics.peak_time
    if elapsed_minutes <= peak:
        if peak == 0:
            return 100.0
        return math.sin(math.pi / 2 * min(elapsed_minutes / peak, 1.0)) * 100.0
    hours_past_peak = (elapsed_minutes - peak) / 60.0
    return decay(100.0, kinetics.half_life, hours_past_peak)


def effectiveness(log: SubstanceLog, substance: Substance, now: float) -> float:
    """Return the current effectiveness (0-100) of a logged dose at ``now``."""

    elapsed_minutes = (now - log.timestamp) / MS_PER_MINUTE
    if elapsed_minutes < 0:
        return 0.0
    return effectiveness_at(resolve(substance, log.dosage), elapsed_minutes)


def onset_progress(kinetics: Kinetics, elapsed_minutes: float) -> float:
    """Return how far (0-1) the advisory onset window has progressed.

    This uses ``onset_time`` as a steepness parameter and is metadata for
    display only; :func:`effectiveness` never consults it.
    """

    if elapsed_minutes <= 0:
        return 0.0
    if kinetics.onset_time <= 0:
        return 1.0
    return math.sin(math.pi / 2 * min(elapsed_minutes / kinetics.onset_time, 1.0))


def clearance_timestamp(substance: Substance, dose: float, logged_at: float) -> float:
    """Return the instant (epoch ms) at which a dose is considered cleared."""

    kinetics = resolve(substance, dose)
    return logged_at + kinetics.half_life * CLEARANCE_HALF_LIVES * MS_PER_HOUR


class TimelinePoint(NamedTuple):
    timestamp: float
    level: float


@dataclass(frozen=True)
class Timeline:
    """Sampled effectiveness curve of one logged dose.

    Iterating a timeline always regenerates the samples from
    :func:`effectiveness`, so it can be consumed any number of times.
    """

    log: SubstanceLog
    substance: Substance
    interval_minutes: float

    def __post_init__(self) -> None:
        if not self.interval_minutes > 0:
            raise ValueError("interval_minutes must be positive")

    def offsets(self) -> npt.NDArray[np.float64]:
        """Return sample offsets in minutes, including both ends of the duration."""

        total = max(resolve(self.substance, self.log.dosage).duration * 60.0, 0.0)
        steps = int(np.floor(total / self.interval_minutes + 1e-9))
        offsets = np.arange(steps + 1, dtype=float) * self.interval_minutes
        if total - offsets[-1] > 1e-9:
            offsets = np.append(offsets, total)
        return offsets

    def __iter__(self) -> Iterator[TimelinePoint]:
        for offset in self.offsets():
            timestamp = self.log.timestamp + float(offset) * MS_PER_MINUTE
            yield TimelinePoint(timestamp, effectiveness(self.log, self.substance, timestamp))

    def __len__(self) -> int:
        return int(self.offsets().size)

    def as_arrays(self) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Return ``(timestamps, levels)`` as numpy arrays."""

        points = list(self)
        timestamps = np.asarray([point.timestamp for point in points], dtype=float)
        levels = np.asarray([point.level for point in points], dtype=float)
        return timestamps, levels


def timeline(log: SubstanceLog, substance: Substance, interval_minutes: Optional[float] = None) -> Timeline:
    """Return the sampled effectiveness curve of ``log``.

    ``interval_minutes`` defaults to the configured timeline interval.
    """

    if interval_minutes is None:
        interval_minutes = DEFAULT_ENGINE_SETTINGS.timeline_interval_minutes
    return Timeline(log=log, substance=substance, interval_minutes=float(interval_minutes))


__all__ = [
    "CLEARANCE_HALF_LIVES",
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "Timeline",
    "TimelinePoint",
    "clearance_timestamp",
    "decay",
    "effectiveness",
    "effectiveness_at",
    "onset_progress",
    "timeline",
]
