"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mantradex import __version__
from mantradex.api.contracts.dex import ErrorResponse
from mantradex.config import get_settings
from mantradex.errors import (
    ConfigurationError,
    DexError,
    ExecutionError,
    NoRouteError,
    QueryError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ConfigurationError: 400,
    NoRouteError: 404,
    QueryError: 502,
    ExecutionError: 502,
}


async def dex_error_handler(request: Request, exc: DexError) -> JSONResponse:
    """Map DEX errors to JSON error responses."""
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="MANTRA DEX API",
        description="Pool, routing, simulation and swap tools for the MANTRA DEX",
        version=__version__,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DexError, dex_error_handler)

    # Register routes
    from mantradex.api.routes import dex, health, networks

    app.include_router(health.router, tags=["Health"])
    app.include_router(networks.router, tags=["Networks"])
    app.include_router(dex.router, tags=["DEX"])

    return app
