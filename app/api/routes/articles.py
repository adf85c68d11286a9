from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request

from app.adapters.github.client import open_github_client
from app.api.responses import PrettyJSONResponse
from app.core.config import settings
from app.core.errors import AppError
from app.services.article_catalog import ArticleCatalogService

logger = logging.getLogger(__name__)

LIST_ARTICLES_PATH = "/utils/list-articles"


async def list_articles(request: Request) -> PrettyJSONResponse:
    """List visible markdown articles, newest first.

    Registered as a plain Starlette route without a method set, so every
    HTTP method reaches it.

    Returns:
        PrettyJSONResponse: JSON array of articles (possibly empty).

    Raises:
        UpstreamAppError: 500 when the GitHub directory listing fails.
        HTTPException: 500 for any other failure of the catalog flow.
    """
    async with open_github_client(settings.github) as source:
        service = ArticleCatalogService(source)
        try:
            articles = await service.list_articles()
        except AppError:
            raise
        except Exception as exc:
            logger.exception(
                "catalog.failed",
                extra={"error_type": type(exc).__name__, "error_msg": str(exc)},
            )
            raise HTTPException(
                status_code=500,
                detail=f"Unexpected error while listing articles: {exc}",
            ) from exc

    return PrettyJSONResponse([article.model_dump() for article in articles])


def register_article_routes(app: FastAPI) -> None:
    """Attach the article listing route with no method restriction."""
    app.add_route(LIST_ARTICLES_PATH, list_articles, methods=None, include_in_schema=False)
