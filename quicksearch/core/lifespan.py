"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (logging, telemetry, DB engine dispose);
no business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from quicksearch.core.config import get_settings
from quicksearch.infrastructure.persistence import database
from quicksearch.shared.telemetry.logging import setup_logging
from quicksearch.shared.telemetry.telemetry import (
    ServiceTelemetry,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, telemetry (if enabled, with SQLAlchemy instrumentation
    when a database is configured). Shutdown: telemetry flush, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        telemetry = ServiceTelemetry.from_settings(settings)
        if telemetry.start() is not None:
            database._ensure_engine()
            telemetry.instrument(app, database.engine)
            set_telemetry(telemetry)

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
