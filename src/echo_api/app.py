"""
Main FastAPI app for the Echo API.
Run manually:
  uvicorn echo_api.app:app --host 0.0.0.0 --port 8080 --reload
or:
  python -m echo_api
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import RedirectResponse

from echo_api import __version__
from echo_api.config import Settings, settings
from echo_api.errors import EchoValidationError, echo_validation_error_handler
from echo_api.routes.echo import router as echo_router
from echo_api.routes.health import router as health_router

# ---------- Logging ----------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logger = logging.getLogger("echo_api")


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or settings

    app = FastAPI(
        title="Echo API",
        description="Reflects client-supplied messages back, optionally transformed.",
        version=__version__,
        docs_url=config.DOCS_URL,
        redoc_url=config.REDOC_URL,
        openapi_tags=[
            {"name": "echo", "description": "Echo a message back"},
            {"name": "health", "description": "Service health and server time"},
        ],
    )

    app.state.settings = config
    app.add_exception_handler(EchoValidationError, echo_validation_error_handler)

    if config.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)
        logger.info("HTTPS redirect enabled")

    # ---------- Routers ----------
    app.include_router(health_router, prefix="")
    app.include_router(echo_router, prefix="/echo", tags=["echo"])
    logger.info("Routers registered: health, echo")

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url=config.DOCS_URL, status_code=302)

    return app


app = create_app()
