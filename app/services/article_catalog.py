"""Article catalog service: list, fetch, filter and order markdown articles.

Pipeline for one request:
1. List the articles directory (a failure here fails the whole request).
2. Keep ``.md`` entries.
3. Fetch and parse every candidate concurrently. Each entry is isolated:
   a failed download or a processing error drops that entry and is logged,
   never surfaced to the caller.
4. Drop hidden articles (``show: false``) and sort by date, newest first.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.adapters.github.base import AbstractContentSource
from app.core.errors import EntryProcessingError
from app.schemas.article import Article, DirectoryEntry
from app.utils.fan_out import parallel_map
from app.utils.front_matter import extract_front_matter_block, parse_front_matter

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"

# Non-ISO layouts accepted for the front-matter date, tried in order
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def is_markdown(name: str) -> bool:
    return name.endswith(MARKDOWN_SUFFIX)


def slug_from_name(name: str) -> str:
    """Strip exactly one trailing ``.md`` from a file name."""
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def parse_article_date(value: str) -> datetime | None:
    """Interpret a front-matter date string.

    ISO 8601 dates and datetimes are accepted, plus a few common written
    layouts. Naive values are taken as UTC.

    Args:
        value: Raw ``date`` value.

    Returns:
        Aware datetime, or None when the value is empty or unparseable.
    """
    value = value.strip()
    if not value:
        return None

    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def date_sort_key(article: Article) -> float:
    """Sort key placing empty/unparseable dates at minus infinity."""
    parsed = parse_article_date(article.date)
    if parsed is None:
        return float("-inf")
    return parsed.timestamp()


def sort_newest_first(articles: list[Article]) -> list[Article]:
    # sorted() is stable with reverse=True: equal dates keep listing order
    return sorted(articles, key=date_sort_key, reverse=True)


def read_metadata(raw_text: str, *, file_name: str) -> dict[str, str]:
    """Extract front-matter metadata, degrading to ``{}`` on any problem.

    Args:
        raw_text: Full markdown document.
        file_name: Used for logging only.

    Returns:
        Parsed metadata; empty when there is no block or parsing failed.
    """
    block = extract_front_matter_block(raw_text)
    if block is None:
        return {}
    try:
        return parse_front_matter(block)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "front_matter.parse_failed",
            extra={"file_name": file_name, "error_type": type(exc).__name__, "error_msg": str(exc)},
        )
        return {}


def build_article(entry: DirectoryEntry, metadata: dict[str, str]) -> Article | None:
    """Turn an entry and its metadata into an Article, or None when hidden."""
    if metadata.get("show") == "false":
        return None
    return Article(
        slug=slug_from_name(entry.name),
        title=metadata.get("title") or entry.name,
        description=metadata.get("description") or "",
        date=metadata.get("date") or "",
        url=entry.download_url or "",
    )


class ArticleCatalogService:
    """Builds the article catalog from a content source.

    Holds no per-request state; the content source carries the immutable
    repository configuration it was constructed with.
    """

    def __init__(self, source: AbstractContentSource) -> None:
        self._source = source

    async def _process_entry(self, entry: DirectoryEntry) -> Article | None:
        if not entry.download_url:
            raise EntryProcessingError(
                code="missing_download_url",
                message=f"No download URL for {entry.name}",
                details={"file_name": entry.name},
            )
        raw_text = await self._source.fetch_raw(entry.download_url)
        metadata = read_metadata(raw_text, file_name=entry.name)
        return build_article(entry, metadata)

    async def list_articles(self) -> list[Article]:
        """Return visible articles, newest first.

        Returns:
            list[Article]: Possibly empty when every entry was filtered out
                or failed.

        Raises:
            UpstreamAppError: If the directory listing fails.
        """
        entries = await self._source.list_directory()
        candidates = [entry for entry in entries if is_markdown(entry.name)]

        outcomes = await parallel_map(self._process_entry, candidates)

        articles: list[Article] = []
        failed = 0
        for outcome in outcomes:
            if not outcome.ok:
                failed += 1
                logger.warning(
                    "catalog.entry_failed",
                    extra={
                        "file_name": outcome.item.name,
                        "error_type": type(outcome.error).__name__,
                        "error_msg": str(outcome.error),
                    },
                )
                continue
            if outcome.value is not None:
                articles.append(outcome.value)

        logger.info(
            "catalog.built",
            extra={
                "entries": len(entries),
                "candidates": len(candidates),
                "failed": failed,
                "hidden": len(candidates) - failed - len(articles),
                "articles": len(articles),
            },
        )
        return sort_newest_first(articles)
