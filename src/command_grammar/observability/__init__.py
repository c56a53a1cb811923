"""
observability/__init__.py

PURPOSE: OpenTelemetry tracing for command interpretation.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk
"""

from command_grammar.observability.telemetry import (
    get_tracer,
    init_telemetry,
    shutdown_telemetry,
)

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
