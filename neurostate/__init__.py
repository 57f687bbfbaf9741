"""Deterministic pharmacokinetic and neurochemical-state simulation.

Given a catalog of substances and a history of logged doses, the engine
computes each dose's time-varying effectiveness, the neurotransmitter and
receptor snapshot of all active doses on top of a circadian baseline, and a
usage tolerance score.  It is an in-process library: callers own the log
history and the clock and receive fresh, independent results.
"""

from .catalog import DEFAULT_CATALOG, SubstanceCatalog, UnknownSubstanceError
from .engine import (
    NeurochemicalStateEngine,
    active_logs,
    clearance_timestamp,
    decay,
    effectiveness,
    hour_of_day,
    receptor_impacts,
    recompute,
    resolve,
    timeline,
    tolerance,
)
from .logbook import InvalidLogError, NeuroSession, create_log
from .models import (
    InteractionType,
    Kinetics,
    Neurotransmitter,
    NTStatus,
    Receptor,
    StatusEffect,
    Substance,
    SubstanceLog,
)

__all__ = [
    "DEFAULT_CATALOG",
    "InteractionType",
    "InvalidLogError",
    "Kinetics",
    "NTStatus",
    "NeuroSession",
    "NeurochemicalStateEngine",
    "Neurotransmitter",
    "Receptor",
    "StatusEffect",
    "Substance",
    "SubstanceCatalog",
    "SubstanceLog",
    "UnknownSubstanceError",
    "active_logs",
    "clearance_timestamp",
    "create_log",
    "decay",
    "effectiveness",
    "hour_of_day",
    "receptor_impacts",
    "recompute",
    "resolve",
    "timeline",
    "tolerance",
]
