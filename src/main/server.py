#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

Runs the API under uvicorn using the configured host and port.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


def main():
    """Main entry point for the API server."""
    settings = get_settings()

    logger.info(
        "Starting API server",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        environment=settings.environment.value,
    )

    # log_config=None keeps the structlog handlers configured above
    uvicorn.run(
        "src.main.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
