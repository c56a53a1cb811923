"""
telemetry.py

PURPOSE: OpenTelemetry initialization and tracer lookup.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
Tracers are fetched from the opentelemetry API, which hands out no-op spans
until a provider is installed. init_telemetry installs an SDK provider with a
console exporter once, at startup, when tracing is enabled. Modules can call
get_tracer() at import time either way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

if TYPE_CHECKING:
    from command_grammar.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Initialize OpenTelemetry tracing.

    Does nothing when tracing is disabled or a provider is already installed.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _tracer_provider

    if _tracer_provider is not None:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return

    resource = Resource.create({"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(f"Telemetry initialized: service={settings.service_name}")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for the given module name.

    Spans are no-ops until init_telemetry() installs a provider.

    Args:
        name: Module name (typically __name__).
    """
    return trace.get_tracer(name)


def shutdown_telemetry() -> None:
    """Flush pending spans. Safe to call if telemetry was never initialized."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.debug("Telemetry shutdown complete")
    _tracer_provider = None
