"""GitHub content adapters: directory listing and raw file download."""

from app.adapters.github.base import AbstractContentSource
from app.adapters.github.client import GitHubContentClient, open_github_client

__all__ = [
    "AbstractContentSource",
    "GitHubContentClient",
    "open_github_client",
]
