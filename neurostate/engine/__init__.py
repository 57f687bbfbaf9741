"""
neurostate.engine
=================

Computational core of the simulation.  Every function in this package is a
pure, synchronous computation over its arguments: no I/O, no clocks and no
state held between calls.  Callers supply ``now`` as epoch milliseconds.

The modules build on each other leaf first:

``resolver``
    Evaluates a substance's declarative calibration table at a dose.

``kinetics``
    Decay, the onset/decay effectiveness curve, clearance horizons and
    timeline sampling for a single logged dose.

``receptors``
    Per-substance receptor impacts and the interaction rule table.

``state``
    Rebuilds the neurotransmitter snapshot from circadian baselines and the
    active doses.

``usage``
    Scores usage tolerance from the recent log history.

``clock``
    Converts epoch milliseconds to local dates and fractional hours.
"""

from .clock import hour_of_day  # noqa: F401
from .kinetics import clearance_timestamp, decay, effectiveness, timeline  # noqa: F401
from .receptors import INTERACTION_RULES, receptor_impacts  # noqa: F401
from .resolver import resolve  # noqa: F401
from .state import NeurochemicalStateEngine, active_logs, recompute  # noqa: F401
from .usage import tolerance  # noqa: F401

__all__ = [
    "INTERACTION_RULES",
    "NeurochemicalStateEngine",
    "active_logs",
    "clearance_timestamp",
    "decay",
    "hour_of_day",
    "effectiveness",
    "receptor_impacts",
    "recompute",
    "resolve",
    "timeline",
    "tolerance",
]
