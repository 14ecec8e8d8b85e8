"""FastAPI application entrypoint for the waitlist server."""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from sabwait.api.http import handle_http_exception
from sabwait.api.http import handle_unexpected_error
from sabwait.api.http import handle_validation_error
from sabwait.api.routers import exempt as exempt_routes
from sabwait.api.routers import jobs as job_routes
from sabwait.api.routers import players as player_routes
from sabwait.api.routers import status as status_routes
from sabwait.api.routers import waitlist as waitlist_routes
from sabwait.core.config import Settings
from sabwait.core.config import load_settings
from sabwait.core.logs import configure_logging
from sabwait.runtime import Runtime
from sabwait.runtime import build_runtime
from sabwait.sessions.sweeper import SessionSweeper
from sabwait.ws import routers as ws_routes
from sabwait.ws.broadcast import broadcast_players_update

logger = logging.getLogger("sabwait.server")


def _build_sweeper(runtime: Runtime) -> SessionSweeper:
    async def _on_evicted(_: int) -> None:
        await broadcast_players_update(runtime)

    return SessionSweeper(
        runtime.sessions,
        interval_seconds=runtime.settings.sab_session_sweep_interval_seconds,
        on_evicted=_on_evicted,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    runtime: Runtime = app.state.runtime
    sweeper = _build_sweeper(runtime)
    sweeper.start()
    logger.info(
        "SAB Waitlist Server ready (API key: %s)",
        "configured" if runtime.settings.api_key_configured else "not set",
    )
    try:
        yield
    finally:
        await sweeper.stop()
        logger.info("Shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app with its own runtime; each call starts from empty state."""
    app = FastAPI(title="SAB Waitlist System", lifespan=lifespan)
    app.state.runtime = build_runtime(settings)

    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(status_routes.router)
    app.include_router(job_routes.router)
    app.include_router(player_routes.router)
    app.include_router(exempt_routes.router)
    app.include_router(waitlist_routes.router)
    app.include_router(ws_routes.router)
    return app


app = create_app()


def run() -> None:
    """Console entrypoint: serve ``app`` with uvicorn."""
    settings = load_settings()
    configure_logging(settings.sab_log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.sab_app_host,
        port=settings.sab_app_port,
        log_config=None,
    )


__all__ = ["app", "create_app", "lifespan", "run"]
