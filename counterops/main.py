"""counterops API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CounterOpsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One RemoteCounterClient per process, opened and closed by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Dispatcher stored on app.state, resolved per request via get_dispatcher
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from counterops.api.error_handlers import register_error_handlers
from counterops.api.routes import health, operations
from counterops.config import get_settings
from counterops.infrastructure.counter_client import build_counter_client
from counterops.infrastructure.observability import setup_logging
from counterops.services.operation_dispatch import OperationDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    async with build_counter_client(settings) as client:
        app.state.dispatcher = OperationDispatcher(client)
        logger.info(f"counterops API started (counter service: {settings.counter_api_base_url})")
        yield
    logger.info("counterops API shutting down")


app = FastAPI(
    title="counterops API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(operations.router)

register_error_handlers(app)
