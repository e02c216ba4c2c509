"""Serve the marketing API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from marketing_generator.config.settings import get_settings
from marketing_generator.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    settings = get_settings()
    logger.info("Server is running on port %s", settings.port)
    logger.info("Health check: http://localhost:%s/api/health", settings.port)
    uvicorn.run(
        "marketing_generator.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
