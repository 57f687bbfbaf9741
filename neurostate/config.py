"""Configuration helpers for the simulation engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping, Optional

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _parse_positive_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


@dataclass(slots=True)
class EngineSettings:
    """Tunable defaults for the engine's public helpers.

    ``timezone`` is an IANA zone name used to bucket logs into calendar days
    for tolerance scoring.  When unset the system local time is used.
    """

    timeline_interval_minutes: float = 15.0
    tolerance_window_days: float = 7.0
    effectiveness_floor: float = 1.0
    timezone: Optional[str] = None

    def tzinfo(self) -> Optional[tzinfo]:
        """Return the configured zone, or ``None`` for system local time."""

        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return None

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        prefix: str = "NEUROSTATE_",
    ) -> "EngineSettings":
        """Create settings from environment variables.

        Unparseable or non-positive numbers fall back to the defaults.
        """

        env = os.environ if env is None else env
        floor_raw = env.get(f"{prefix}EFFECTIVENESS_FLOOR")
        try:
            floor = float(floor_raw) if floor_raw is not None else 1.0
        except (TypeError, ValueError):
            floor = 1.0
        return cls(
            timeline_interval_minutes=_parse_positive_float(env.get(f"{prefix}TIMELINE_INTERVAL_MINUTES"), 15.0),
            tolerance_window_days=_parse_positive_float(env.get(f"{prefix}TOLERANCE_WINDOW_DAYS"), 7.0),
            effectiveness_floor=max(0.0, min(100.0, floor)),
            timezone=(env.get(f"{prefix}TIMEZONE") or "").strip() or None,
        )


def _parse_ratio(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        return default
    return max(0.0, min(1.0, parsed))


def _parse_flag(raw: str | None) -> bool:
    return raw is not None and raw.strip().lower() not in {"", "0", "false", "no", "off"}


@dataclass(slots=True)
class TelemetryConfig:
    """Tracing settings read by :func:`neurostate.telemetry.configure_telemetry`.

    Spans are exported over OTLP/HTTP.  Setting an exporter endpoint enables
    tracing even without the explicit flag.
    """

    enabled: bool = False
    service_name: str = "neurostate"
    environment: str = "development"
    exporter_endpoint: Optional[str] = None
    sampling_ratio: float = 0.1

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        prefix: str = "OTEL_",
    ) -> "TelemetryConfig":
        env = os.environ if env is None else env
        endpoint = env.get(f"{prefix}EXPORTER_OTLP_ENDPOINT") or None
        return cls(
            enabled=_parse_flag(env.get(f"{prefix}ENABLED")) or endpoint is not None,
            service_name=env.get(f"{prefix}SERVICE_NAME") or "neurostate",
            environment=env.get(f"{prefix}ENVIRONMENT") or env.get("DEPLOYMENT_ENV") or "development",
            exporter_endpoint=endpoint,
            sampling_ratio=_parse_ratio(env.get(f"{prefix}SAMPLING_RATIO"), 0.1),
        )


DEFAULT_ENGINE_SETTINGS = EngineSettings.from_env()
DEFAULT_TELEMETRY_CONFIG = TelemetryConfig.from_env()
