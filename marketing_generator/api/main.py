"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from marketing_generator import __version__
from marketing_generator.api import marketing
from marketing_generator.config.settings import get_settings
from marketing_generator.errors import MarketingAPIException
from marketing_generator.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


def _error_body(error: str, message: str) -> dict[str, str]:
    return {"error": error, "message": message}


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MarketingAPIException)
    async def handle_marketing_error(request: Request, exc: MarketingAPIException) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.error, exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        message = f"Invalid request fields: {', '.join(fields)}" if fields else "Invalid request body."
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body("Validation failed", message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Something went wrong!", "An unexpected error occurred."),
        )


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title="AI Marketing Generator API",
        version=__version__,
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    uploads_dir = Path(settings.uploads_dir)
    if uploads_dir.is_dir():
        app.mount("/uploads", StaticFiles(directory=uploads_dir), name="uploads")

    _register_exception_handlers(app)
    app.include_router(marketing.router)

    @app.get("/api/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Liveness endpoint used for readiness probes."""

        return {
            "status": "OK",
            "message": "Marketing Generator API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/", tags=["system"])
    async def service_info() -> dict[str, object]:
        return {
            "message": "AI Marketing Generator API",
            "version": __version__,
            "endpoints": {
                "health": "/api/health",
                "generate": "POST /api/marketing/generate",
            },
        }

    return app


app = create_app()
