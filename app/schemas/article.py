"""Pydantic schemas for the article catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DirectoryEntry(BaseModel):
    """One item of a GitHub contents API directory listing.

    Only the fields the catalog needs are declared; the rest of the
    payload (sha, size, links, ...) is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="File name, e.g. 'hello-world.md'.")
    path: str | None = Field(default=None, description="Path inside the repository.")
    type: str | None = Field(default=None, description="'file', 'dir', 'symlink' or 'submodule'.")
    download_url: str | None = Field(
        default=None,
        description="Raw content URL; null for directories.",
    )


class Article(BaseModel):
    """Catalog item describing one visible markdown article."""

    slug: str = Field(..., description="File name without its trailing '.md'.")
    title: str = Field(..., description="Front-matter title, or the file name when absent.")
    description: str = Field(default="", description="Front-matter description.")
    date: str = Field(default="", description="Front-matter date, used only for ordering.")
    url: str = Field(..., description="Raw content URL the article was read from.")
