import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Sequence

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from neurostate.catalog import NEUROTRANSMITTER_SYSTEMS, SubstanceCatalog
from neurostate.models import (
    Calibration,
    Constant,
    InteractionType,
    Kinetics,
    ReceptorInteraction,
    Substance,
    SubstanceCategory,
    SubstanceLog,
)

# 2024-03-10 12:00 UTC
T0 = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc).timestamp() * 1000.0
MINUTE = 60_000.0
HOUR = 3_600_000.0
DAY = 24 * HOUR


SubstanceFactory = Callable[..., Substance]


@pytest.fixture()
def make_substance() -> SubstanceFactory:
    """Build dose-independent substances for targeted scenarios."""

    def _factory(
        substance_id: str = "sample",
        *,
        half_life: float = 5.0,
        peak_time: float = 45.0,
        duration: float = 10.0,
        tolerance_rate: float = 5.0,
        interactions: Sequence[tuple[str, str, InteractionType, float]] = (),
    ) -> Substance:
        return Substance(
            id=substance_id,
            name=substance_id.title(),
            category=SubstanceCategory.NOOTROPIC,
            dosage_unit="mg",
            common_doses=(100,),
            default_kinetics=Kinetics(half_life, 10.0, peak_time, duration, tolerance_rate),
            calibration=Calibration(
                half_life=Constant(half_life),
                onset_time=Constant(10.0),
                peak_time=Constant(peak_time),
                duration=Constant(duration),
                tolerance_rate=Constant(tolerance_rate),
            ),
            receptor_interactions=tuple(
                ReceptorInteraction(receptor, system, kind, magnitude)
                for receptor, system, kind, magnitude in interactions
            ),
        )

    return _factory


@pytest.fixture()
def make_catalog() -> Callable[..., SubstanceCatalog]:
    def _factory(*substances: Substance) -> SubstanceCatalog:
        return SubstanceCatalog(substances, NEUROTRANSMITTER_SYSTEMS)

    return _factory


@pytest.fixture()
def make_log() -> Callable[..., SubstanceLog]:
    counter = {"value": 0}

    def _factory(
        substance_id: str,
        *,
        timestamp: float = T0,
        dosage: float = 100.0,
        clearance: float | None = None,
    ) -> SubstanceLog:
        counter["value"] += 1
        return SubstanceLog(
            id=f"log-{counter['value']}",
            substance_id=substance_id,
            dosage=dosage,
            timestamp=timestamp,
            expected_clearance=clearance if clearance is not None else timestamp + 2 * DAY,
        )

    return _factory
