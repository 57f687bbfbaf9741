from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from conftest import DAY, HOUR, T0
from neurostate.catalog import DEFAULT_CATALOG
from neurostate.engine.usage import TOLERANCE_FLOOR, tolerance
from neurostate.models import Anchors, Calibration, Constant

UTC = timezone.utc


def _at(year: int, month: int, day: int, hour: int, minute: int = 0) -> float:
    return datetime(year, month, day, hour, minute, tzinfo=UTC).timestamp() * 1000.0


def test_no_history_means_no_tolerance() -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")

    assert tolerance([], nicotine, T0, UTC) == 100.0


def test_distinct_days_cost_the_tolerance_rate(make_log) -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")
    logs = [make_log("nicotine", timestamp=_at(2024, 3, day, 9), dosage=2) for day in (4, 5, 6, 7, 8)]
    logs.append(make_log("nicotine", timestamp=_at(2024, 3, 8, 18), dosage=4))

    assert tolerance(logs, nicotine, T0, UTC) == pytest.approx(40.0)


def test_score_is_floored(make_log) -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")
    logs = [make_log("nicotine", timestamp=T0 - DAY * 7 + HOUR + day * DAY, dosage=2) for day in range(7)]
    logs.append(make_log("nicotine", timestamp=T0 - HOUR, dosage=2))

    assert tolerance(logs, nicotine, T0, UTC) == TOLERANCE_FLOOR


def test_only_recent_logs_of_the_substance_count(make_log) -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")
    logs = [
        make_log("nicotine", timestamp=T0 - 8 * DAY, dosage=2),
        make_log("nicotine", timestamp=T0 - 7 * DAY, dosage=2),
        make_log("caffeine", timestamp=T0 - HOUR, dosage=100),
        make_log("nicotine", timestamp=T0 - 2 * HOUR, dosage=2),
        make_log("nicotine", timestamp=T0 + HOUR, dosage=2),
    ]

    assert tolerance(logs, nicotine, T0, UTC) == pytest.approx(88.0)


def test_rate_comes_from_most_recent_dose(make_substance, make_log) -> None:
    ramp = replace(
        make_substance("ramp"),
        calibration=Calibration(
            half_life=Constant(5),
            onset_time=Constant(10),
            peak_time=Constant(45),
            duration=Constant(10),
            tolerance_rate=Anchors(1, 10, 2, 20),
        ),
    )
    logs = [
        make_log("ramp", timestamp=T0 - 2 * HOUR, dosage=1),
        make_log("ramp", timestamp=T0 - DAY - 2 * HOUR, dosage=2),
    ]

    assert tolerance(logs, ramp, T0, UTC) == pytest.approx(80.0)


def test_calendar_days_follow_the_timezone(make_log) -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")
    logs = [
        make_log("nicotine", timestamp=_at(2024, 3, 8, 23, 30), dosage=2),
        make_log("nicotine", timestamp=_at(2024, 3, 9, 0, 30), dosage=2),
    ]
    minus_two = timezone(timedelta(hours=-2))

    assert tolerance(logs, nicotine, T0, UTC) == pytest.approx(76.0)
    assert tolerance(logs, nicotine, T0, minus_two) == pytest.approx(88.0)


def test_window_length_is_configurable(make_log) -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")
    logs = [make_log("nicotine", timestamp=T0 - days * DAY - HOUR, dosage=2) for days in (0, 1, 2)]

    assert tolerance(logs, nicotine, T0, UTC, window_days=1.5) == pytest.approx(76.0)
    assert tolerance(logs, nicotine, T0, UTC, window_days=7) == pytest.approx(64.0)
