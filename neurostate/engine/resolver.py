"""Dose to kinetics resolution.

A single generic resolver evaluates every substance's declarative
:class:`~neurostate.models.Calibration` table.  Anchored fields are linear
in dose and are *not* clamped to the anchor range: doses outside it are
extrapolated along the same line.  :class:`~neurostate.models.Scaled`
fields are evaluated last, from the rounded values of their source fields.

Rounding is half-up (``2.5 -> 3``, ``76.45 -> 76.5`` at one decimal), so
values such as a 77 min peak do not drift to the even neighbour.
"""

from __future__ import annotations

import math
from typing import Dict, Mapping, Optional

from ..models import Anchors, Calibration, Constant, FieldCalibration, Kinetics, Scaled, Substance


def interpolation_factor(anchors: Anchors, dose: float) -> float:
    """Return the unclamped position of ``dose`` between the two anchor doses."""

    return (float(dose) - anchors.low_dose) / (anchors.high_dose - anchors.low_dose)


def round_half_up(value: float, precision: Optional[int]) -> float:
    if precision is None:
        return float(value)
    scale = 10 ** precision
    return math.floor(value * scale + 0.5) / scale


def resolve_field(
    calibration: FieldCalibration,
    dose: float,
    resolved: Optional[Mapping[str, float]] = None,
) -> float:
    """Evaluate one calibration entry at ``dose``.

    ``resolved`` holds the already evaluated fields a :class:`Scaled` entry
    may refer to.
    """

    if isinstance(calibration, Constant):
        return float(calibration.value)
    if isinstance(calibration, Scaled):
        if resolved is None or calibration.source not in resolved:
            raise ValueError(f"scaled calibration needs a resolved '{calibration.source}'")
        return round_half_up(resolved[calibration.source] * calibration.factor, calibration.precision)
    t = interpolation_factor(calibration, dose)
    if t == 1.0:
        value = calibration.high_value
    else:
        value = calibration.low_value + (calibration.high_value - calibration.low_value) * t
    return round_half_up(value, calibration.precision)


def resolve_calibration(calibration: Calibration, dose: float) -> Kinetics:
    values: Dict[str, float] = {}
    derived = []
    for name, entry in calibration.items():
        if isinstance(entry, Scaled):
            derived.append((name, entry))
        else:
            values[name] = resolve_field(entry, dose)
    for name, entry in derived:
        values[name] = resolve_field(entry, dose, values)
    return Kinetics(**values)


def resolve(substance: Substance, dose: float) -> Kinetics:
    """Return the kinetic parameters of ``substance`` at ``dose``.

    Identical inputs always produce identical output.
    """

    return resolve_calibration(substance.calibration, dose)


def is_extrapolated(substance: Substance, dose: float) -> bool:
    """Return ``True`` when any anchored field of ``substance`` is outside its anchors at ``dose``."""

    for _, entry in substance.calibration.items():
        if isinstance(entry, Anchors) and not entry.covers(dose):
            return True
    return False


__all__ = [
    "interpolation_factor",
    "is_extrapolated",
    "resolve",
    "resolve_calibration",
    "resolve_field",
    "round_half_up",
]
