"""
Process entry point: configure logging and serve the API with uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn

from roster.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Application starting and listening on %s:%d", settings.host, settings.port
    )
    uvicorn.run(
        "roster.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
