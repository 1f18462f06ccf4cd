"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from quicksearch.shared.telemetry.logging import setup_logging
from quicksearch.shared.telemetry.telemetry import (
    ServiceTelemetry,
    get_telemetry,
    set_telemetry,
)
from quicksearch.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "ServiceTelemetry",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "TracedOperation",
]
