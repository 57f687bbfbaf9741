"""Usage tolerance scoring.

Tolerance is scored from the number of distinct calendar days on which a
substance was logged within a trailing window (7 days by default).  Each
day costs the tolerance rate of the most recent in-window dose.  The score
never drops below :data:`TOLERANCE_FLOOR`.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional, Sequence

from ..config import DEFAULT_ENGINE_SETTINGS
from ..models import Substance, SubstanceLog
from .clock import local_date
from .kinetics import MS_PER_HOUR
from .receptors import clamp
from .resolver import resolve

TOLERANCE_FLOOR = 10.0
NO_TOLERANCE = 100.0


def tolerance(
    log_history: Sequence[SubstanceLog],
    substance: Substance,
    now: float,
    tz: Optional[tzinfo] = None,
    *,
    window_days: Optional[float] = None,
) -> float:
    """Return the tolerance score (10-100, 100 = no tolerance) of ``substance`` at ``now``.

    Calendar days are taken in ``tz``; when omitted the configured zone is
    used, falling back to system local time.
    """

    if window_days is None:
        window_days = DEFAULT_ENGINE_SETTINGS.tolerance_window_days
    if tz is None:
        tz = DEFAULT_ENGINE_SETTINGS.tzinfo()
    window_start = now - window_days * 24 * MS_PER_HOUR

    recent = sorted(
        (
            log
            for log in log_history
            if log.substance_id == substance.id and window_start < log.timestamp <= now
        ),
        key=lambda log: log.timestamp,
    )
    if not recent:
        return NO_TOLERANCE

    days_used = len({local_date(log.timestamp, tz) for log in recent})
    rate = resolve(substance, recent[-1].dosage).tolerance_rate
    return clamp(NO_TOLERANCE - days_used * rate, TOLERANCE_FLOOR, NO_TOLERANCE)


__all__ = ["NO_TOLERANCE", "TOLERANCE_FLOOR", "tolerance"]
