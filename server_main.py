"""Entry point for the carousel HTTP server.

Usage:
    # Development (with auto-reload):
    RELOAD=true python server_main.py

    # Or directly with uvicorn:
    uvicorn src.api.app:app --reload --port 3000

    # Production:
    ENVIRONMENT=production PORT=8080 python server_main.py
"""

import os

import uvicorn

from src.core.logging import configure_logging, get_logger

# Configure structured logging before importing app
configure_logging()

logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("server_listening", host=host, port=port, reload=reload)

    uvicorn.run(
        "src.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # keep the structlog setup above
    )


if __name__ == "__main__":
    main()
