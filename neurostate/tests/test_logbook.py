import logging
import math

import pytest
from pydantic import ValidationError

from conftest import HOUR, MINUTE, T0
from neurostate.catalog import DEFAULT_CATALOG, UnknownSubstanceError
from neurostate.config import DEFAULT_ENGINE_SETTINGS
from neurostate.engine.kinetics import clearance_timestamp
from neurostate.logbook import InvalidLogError, NeuroSession, create_log
from neurostate.models import Anchors, NTStatus, SubstanceLog


def test_create_log_freezes_clearance() -> None:
    caffeine = DEFAULT_CATALOG.require("caffeine")

    log = create_log(caffeine, 200, T0, log_id="morning")

    assert log.id == "morning"
    assert log.substance_id == "caffeine"
    assert log.timestamp == T0
    assert log.expected_clearance == clearance_timestamp(caffeine, 200, T0)
    with pytest.raises(ValidationError):
        log.expected_clearance = T0 + HOUR  # type: ignore[misc]


def test_create_log_generates_unique_ids() -> None:
    nicotine = DEFAULT_CATALOG.require("nicotine")

    first = create_log(nicotine, 2, T0)
    second = create_log(nicotine, 2, T0)

    assert first.id and second.id and first.id != second.id


@pytest.mark.parametrize("dosage", [0, -5])
def test_non_positive_dosage_is_rejected(dosage: float) -> None:
    with pytest.raises(InvalidLogError):
        create_log(DEFAULT_CATALOG.require("caffeine"), dosage, T0)


def test_non_positive_half_life_is_rejected(make_substance) -> None:
    from dataclasses import replace

    base = make_substance("steep")
    steep = replace(base, calibration=replace(base.calibration, half_life=Anchors(10, 1, 20, 5)))

    assert create_log(steep, 15, T0).expected_clearance > T0
    with pytest.raises(InvalidLogError):
        create_log(steep, 5, T0)


def test_extrapolated_dose_is_logged_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    caffeine = DEFAULT_CATALOG.require("caffeine")

    with caplog.at_level(logging.WARNING, logger="neurostate.logbook"):
        log = create_log(caffeine, 800, T0)

    assert log.dosage == 800
    assert any("extrapolated" in record.getMessage() for record in caplog.records)


def test_substance_log_validation() -> None:
    with pytest.raises(ValidationError):
        SubstanceLog(id="x", substance_id="caffeine", dosage=0, timestamp=T0, expected_clearance=T0 + HOUR)
    with pytest.raises(ValidationError):
        SubstanceLog(id="x", substance_id="caffeine", dosage=100, timestamp=T0, expected_clearance=T0)
    with pytest.raises(ValidationError):
        SubstanceLog.model_validate({"id": "x", "substanceId": "caffeine", "timestamp": T0})
    assert issubclass(ValidationError, ValueError)


@pytest.mark.parametrize(
    "field,value",
    [("timestamp", math.nan), ("expected_clearance", math.nan), ("expected_clearance", math.inf), ("dosage", math.inf)],
)
def test_substance_log_rejects_non_finite_numbers(field: str, value: float) -> None:
    fields = {"id": "x", "substance_id": "caffeine", "dosage": 100.0, "timestamp": T0, "expected_clearance": T0 + HOUR}
    fields[field] = value

    with pytest.raises(ValidationError):
        SubstanceLog(**fields)


def test_substance_log_accepts_wire_names() -> None:
    payload = {
        "id": "abc",
        "substanceId": "l-tyrosine",
        "dosage": 500,
        "timestamp": T0,
        "expectedClearance": T0 + 9 * HOUR,
    }

    log = SubstanceLog.model_validate(payload)

    assert log.substance_id == "l-tyrosine"
    assert log.expected_clearance == T0 + 9 * HOUR
    assert log.model_dump(by_alias=True) == {**payload, "dosage": 500.0, "timestamp": T0}


def test_session_logs_and_refreshes() -> None:
    session = NeuroSession()
    entry = session.log_substance("nicotine", 2, T0)

    snapshot = session.refresh(T0 + 15 * MINUTE, 9.0)
    dopamine = next(nt for nt in snapshot if nt.id == "dopamine")

    assert session.logs == (entry,)
    assert dopamine.status is NTStatus.ENHANCED
    assert [effect.source for effect in dopamine.receptor("d1").status_effects] == ["Nicotine"]


def test_session_coalesces_identical_refreshes(monkeypatch: pytest.MonkeyPatch) -> None:
    session = NeuroSession()
    calls = []
    original = session._engine.recompute

    def counting(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(session._engine, "recompute", counting)
    session.log_substance("caffeine", 100, T0)

    first = session.refresh(T0 + HOUR, 12.0)
    first[0].current_level = -1.0
    second = session.refresh(T0 + HOUR, 12.0)
    assert len(calls) == 1
    assert second[0].current_level != -1.0

    session.refresh(T0 + 2 * HOUR, 13.0)
    session.log_substance("l-theanine", 200, T0 + 2 * HOUR)
    session.refresh(T0 + 2 * HOUR, 13.0)
    assert len(calls) == 3


def test_session_remove_and_clear() -> None:
    session = NeuroSession()
    first = session.log_substance("caffeine", 100, T0)
    session.log_substance("shilajit", 250, T0)

    assert session.remove_log(first.id) is True
    assert session.remove_log("missing") is False
    assert [log.substance_id for log in session.logs] == ["shilajit"]

    session.clear_logs()
    assert session.logs == ()
    baseline = session.refresh(T0, 12.0)
    assert all(nt.status is NTStatus.STABLE for nt in baseline)


def test_session_rejects_unknown_substances() -> None:
    session = NeuroSession()

    with pytest.raises(UnknownSubstanceError):
        session.log_substance("unobtainium", 10, T0)
    with pytest.raises(KeyError):
        session.tolerance("unobtainium", T0)


def test_session_tolerance() -> None:
    session = NeuroSession()
    session.log_substance("caffeine", 100, T0)

    assert session.tolerance("caffeine", T0 + HOUR) == pytest.approx(95.0)
    assert session.tolerance("nicotine", T0 + HOUR) == 100.0


def test_session_derives_hour_from_configured_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(DEFAULT_ENGINE_SETTINGS, "timezone", "UTC")
    session = NeuroSession()
    calls = []
    original = session._engine.recompute

    def counting(now, hour, logs):
        calls.append(hour)
        return original(now, hour, logs)

    monkeypatch.setattr(session._engine, "recompute", counting)
    session.log_substance("caffeine", 100, T0)

    implicit = session.refresh(T0 + 30 * MINUTE)
    explicit = session.refresh(T0 + 30 * MINUTE, 12.5)

    assert calls == [12.5]
    assert implicit == explicit
