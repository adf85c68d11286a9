"""GitHub contents API client built on httpx."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from pydantic import ValidationError

from app.adapters.github.base import AbstractContentSource
from app.core.config import GitHubSettings
from app.core.errors import EntryProcessingError, UpstreamAppError
from app.schemas.article import DirectoryEntry

logger = logging.getLogger(__name__)

# Every markdown file is fetched at once, so the pool must not queue requests
UNBOUNDED_LIMITS = httpx.Limits(max_connections=None, max_keepalive_connections=None)


class GitHubContentClient(AbstractContentSource):
    """Reads the articles directory of one repository/branch.

    Each call is attempted exactly once; retries and timeouts are left to
    the underlying ``httpx.AsyncClient`` configuration.
    """

    def __init__(self, github: GitHubSettings, client: httpx.AsyncClient) -> None:
        """Initialize the client.

        Args:
            github: Immutable repository location and credential.
            client: Shared async HTTP client; its lifecycle belongs to the caller.
        """
        self._github = github
        self._client = client

    def _listing_headers(self) -> dict[str, str]:
        headers = {"Accept": self._github.accept}
        if self._github.token:
            headers["Authorization"] = f"Bearer {self._github.token}"
        return headers

    async def list_directory(self) -> list[DirectoryEntry]:
        """List the articles directory at the configured branch.

        Returns:
            list[DirectoryEntry]: Entries in the order GitHub returned them.

        Raises:
            UpstreamAppError: On transport errors, non-success statuses or a
                payload that is not a list of entries.
        """
        url = self._github.contents_url
        try:
            response = await self._client.get(
                url,
                params={"ref": self._github.branch},
                headers=self._listing_headers(),
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "github.listing_request_failed",
                extra={"url": url, "error_type": type(exc).__name__, "error_msg": str(exc)},
            )
            raise UpstreamAppError(
                code="github_request_failed",
                message=f"GitHub API request failed: {exc}",
                details={"url": url},
            ) from exc

        if not response.is_success:
            logger.warning(
                "github.listing_failed",
                extra={"url": url, "upstream_status": response.status_code},
            )
            raise UpstreamAppError(
                code="github_api_error",
                message=f"GitHub API error: {response.status_code}",
                details={"upstream_status": response.status_code, "url": url},
            )

        payload: Any = response.json()
        if not isinstance(payload, list):
            raise UpstreamAppError(
                code="github_unexpected_payload",
                message=f"GitHub API error: expected a directory listing at {self._github.articles_path}",
                details={"url": url},
            )

        try:
            return [DirectoryEntry.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise UpstreamAppError(
                code="github_unexpected_payload",
                message=f"GitHub API error: malformed directory entry ({exc.error_count()} errors)",
                details={"url": url},
            ) from exc

    async def fetch_raw(self, url: str) -> str:
        """Download a file's raw text with a plain GET.

        Args:
            url: The entry's ``download_url``.

        Returns:
            The decoded response body.

        Raises:
            EntryProcessingError: If the response status is not a success.
        """
        response = await self._client.get(url)
        if not response.is_success:
            raise EntryProcessingError(
                code="raw_fetch_failed",
                message=f"Failed to fetch raw markdown: HTTP {response.status_code}",
                details={"url": url, "upstream_status": response.status_code},
            )
        return response.text


@asynccontextmanager
async def open_github_client(github: GitHubSettings) -> AsyncIterator[GitHubContentClient]:
    """Yield a GitHubContentClient backed by a fresh ``httpx.AsyncClient``.

    ``github.timeout_seconds`` left unset disables httpx's default timeout,
    so only the hosting environment bounds a request. The connection pool
    has no upper bound.
    """
    async with httpx.AsyncClient(timeout=github.timeout_seconds, limits=UNBOUNDED_LIMITS) as http_client:
        yield GitHubContentClient(github, http_client)
