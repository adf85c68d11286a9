"""Application factory for FastAPI app.

Centralizes app construction (middleware, handlers, routers) so tests can
build fresh instances.
"""

from __future__ import annotations

from fastapi import FastAPI

from app.api.routes import register_article_routes
from app.core.config import settings
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import request_id_middleware
from app.core.rate_limit import rate_limit_middleware


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Interactive docs, the OpenAPI schema and automatic trailing-slash
    redirects are disabled: the article listing is the only path served,
    everything else is a plain 404.

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Article Catalog API",
        version="0.1.0",
        debug=settings.app.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Middleware: the last one registered runs first, so the request id is
    # bound before the admission gate logs anything.
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    register_article_routes(app)

    return app
