from __future__ import annotations

import logging

import uvicorn

from .app import app
from .config import DEFAULT_CONFIG
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(DEFAULT_CONFIG.log_level)
    logger.info("Server running on http://localhost:%s", DEFAULT_CONFIG.port)
    uvicorn.run(app, host=DEFAULT_CONFIG.host, port=DEFAULT_CONFIG.port, log_config=None)


if __name__ == "__main__":
    main()
