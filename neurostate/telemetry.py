"""OpenTelemetry bootstrap utilities for the simulation engine.

The engine only talks to the OpenTelemetry API, which is a no-op until a
tracer provider is installed.  Applications that want spans exported call
:func:`configure_telemetry` once at start-up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, List

from opentelemetry import trace

from .config import TelemetryConfig

LOGGER = logging.getLogger(__name__)

TRACER_NAME = "neurostate"


def get_tracer() -> trace.Tracer:
    """Return the tracer used by engine modules."""

    return trace.get_tracer(TRACER_NAME)


@dataclass
class TelemetryManager:
    """Configure the tracing exporter when the SDK is available."""

    config: TelemetryConfig
    _shutdown_hooks: List[Callable[[], None]] = field(default_factory=list)
    _enabled: bool = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def configure(self) -> None:
        if not self.config.enabled:
            LOGGER.debug("Telemetry disabled by configuration")
            return
        try:
            from opentelemetry.sdk.resources import Resource
            from opentelemetry.sdk.trace import TracerProvider
            from opentelemetry.sdk.trace.export import BatchSpanProcessor
            from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
                OTLPSpanExporter,
            )
        except ImportError:
            LOGGER.warning("OpenTelemetry SDK not available; telemetry disabled")
            return

        resource = Resource.create(
            {
                "service.name": self.config.service_name,
                "deployment.environment": self.config.environment,
            }
        )
        sampler = TraceIdRatioBased(max(min(self.config.sampling_ratio, 1.0), 0.0))
        provider = TracerProvider(resource=resource, sampler=sampler)
        try:
            span_exporter = OTLPSpanExporter(endpoint=self.config.exporter_endpoint)
            provider.add_span_processor(BatchSpanProcessor(span_exporter))
        except Exception as exc:  # pragma: no cover - exporter wiring
            LOGGER.warning("Failed to initialise OTLP span exporter: %s", exc)
            return
        trace.set_tracer_provider(provider)
        self._shutdown_hooks.append(provider.shutdown)
        self._enabled = True
        LOGGER.info("OpenTelemetry tracing configured (endpoint=%s)", self.config.exporter_endpoint)

    def shutdown(self) -> None:
        for hook in reversed(self._shutdown_hooks):
            try:
                hook()
            except Exception as exc:  # pragma: no cover - exporter teardown
                LOGGER.warning("Telemetry shutdown hook failed: %s", exc)
        self._shutdown_hooks.clear()
        self._enabled = False


def configure_telemetry(config: TelemetryConfig) -> TelemetryManager:
    manager = TelemetryManager(config=config)
    manager.configure()
    return manager


__all__ = ["TelemetryManager", "configure_telemetry", "get_tracer"]
