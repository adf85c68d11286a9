from __future__ import annotations

from app.api.routes.articles import register_article_routes

__all__ = ["register_article_routes"]
