"""Run the Echo API with uvicorn: ``python -m echo_api``."""

import logging

import uvicorn

from echo_api.app import app
from echo_api.config import settings

log = logging.getLogger("echo_api")


def main() -> None:
    log.info(f"Starting Echo API on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
