"""Serve the API with uvicorn.

Usage:
    python -m crud_api

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``).
"""

import logging

from uvicorn import Config, Server

from .config import settings
from .main import app

logger = logging.getLogger("crud_api")


def main() -> None:
    logger.info("Back-end starting on %s:%d", settings.HOST, settings.PORT)
    config = Config(app=app, host=settings.HOST, port=settings.PORT, reload=False, log_level=settings.LOG_LEVEL.lower())
    Server(config).run()


if __name__ == "__main__":
    main()
