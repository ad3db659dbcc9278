"""
Users API Backend - Server Entry Point
=======================================

Usage:
    python -m userapi          (or the `userapi` console script)
    PORT=9000 python -m userapi

Binds settings.host:settings.port (PORT, default 8080). If the socket cannot
be bound, uvicorn gives up during startup; we log that as fatal and the
process exits with a non-zero status.
"""

import logging

import uvicorn

from userapi.config import settings
from userapi.main import app, setup_logging

logger = logging.getLogger("userapi")


def main() -> None:
    setup_logging()
    port = settings.port

    logger.info("Server starting on port %d", port)
    logger.info("Health check available at: http://localhost:%d/api/v1/health", port)

    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=port,
            log_level=settings.log_level.lower(),
            access_log=False,
        )
    except SystemExit as exc:
        if exc.code:
            logger.critical("Server failed to start on port %d", port)
        raise


if __name__ == "__main__":
    main()
