"""OpenTelemetry tracing for quicksearch.

Built from Settings at startup (quicksearch.core.lifespan). One tracer
provider per process; request spans come from the FastAPI instrumentation,
the suggestions pipeline adds `suggestions.aggregate`, `component_index.search`
and `component_store.*` spans, and each SQL statement gets its own span from
the SQLAlchemy instrumentation. Health probes are not traced.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

if TYPE_CHECKING:
    from quicksearch.core.config import Settings

logger = logging.getLogger(__name__)

# Comma-separated regexes (FastAPIInstrumentor excluded_urls)
UNTRACED_URLS = "/api/v1/health"


class SpanExporterKind(str, Enum):
    """Where finished spans go (TELEMETRY_EXPORTER)."""

    CONSOLE = "console"
    OTLP = "otlp"
    NONE = "none"


def build_span_exporter(kind: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Return the span exporter for kind, or None when spans are not exported.

    OTLP without an endpoint and unknown kinds fall back to the console
    exporter with a warning.
    """
    if kind == SpanExporterKind.NONE.value:
        return None
    if kind == SpanExporterKind.OTLP.value:
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("TELEMETRY_EXPORTER=otlp without TELEMETRY_OTLP_ENDPOINT, using console")
    elif kind != SpanExporterKind.CONSOLE.value:
        logger.warning("Unknown span exporter '%s', using console", kind)
    return ConsoleSpanExporter()


class ServiceTelemetry:
    """Tracer provider and instrumentation of the quicksearch app."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
        exporter: str = SpanExporterKind.CONSOLE.value,
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.exporter = exporter
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ServiceTelemetry:
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            exporter=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    def build_tracer_provider(self) -> TracerProvider:
        """Tracer provider with service resource, ratio sampling and the configured exporter."""
        provider = TracerProvider(
            resource=Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            ),
            sampler=ParentBased(TraceIdRatioBased(self.sample_rate)),
        )
        exporter = build_span_exporter(self.exporter, self.otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        return provider

    def start(self) -> TracerProvider | None:
        """Install the tracer provider globally. Returns None when setup failed.

        Telemetry never blocks startup: failures are logged and the app runs
        untraced.
        """
        try:
            self.tracer_provider = self.build_tracer_provider()
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        trace.set_tracer_provider(self.tracer_provider)
        logger.info(
            "Tracing started: service=%s version=%s exporter=%s sample_rate=%s",
            self.service_name,
            self.service_version,
            self.exporter,
            self.sample_rate,
        )
        return self.tracer_provider

    def instrument(self, app: FastAPI, engine: AsyncEngine | None) -> None:
        """Instrument requests, log records and, when a database is configured, SQL statements."""
        if self.tracer_provider is None:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=UNTRACED_URLS,
            )
            # trace ids are attached to records; the format stays the one from setup_logging
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=False
            )
            if engine is not None:
                SQLAlchemyInstrumentor().instrument(
                    engine=engine.sync_engine,
                    tracer_provider=self.tracer_provider,
                    enable_commenter=True,
                )
        except Exception as e:
            logger.exception("Failed to instrument app: %s", e)

    def shutdown(self) -> None:
        """Flush pending spans and shut the provider down."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


_telemetry: ServiceTelemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> ServiceTelemetry | None:
    """Return the process telemetry (set at startup)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: ServiceTelemetry | None) -> None:
    """Set (or clear, with None) the process telemetry."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
