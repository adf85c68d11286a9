"""Builders for fake GitHub responses used across the test modules."""

LISTING_URL = (
    "https://api.github.com/repos/xyt6151/whio-digital-site/contents/articles?ref=main"
)
RAW_BASE = "https://raw.githubusercontent.com/xyt6151/whio-digital-site/main/articles"


def raw_url(name: str) -> str:
    return f"{RAW_BASE}/{name}"


def listing_entry(name: str, *, entry_type: str = "file") -> dict:
    """Build a directory entry shaped like the GitHub contents API output."""
    return {
        "name": name,
        "path": f"articles/{name}",
        "sha": "0" * 40,
        "size": 123,
        "type": entry_type,
        "download_url": raw_url(name) if entry_type == "file" else None,
    }


def markdown(**metadata: str) -> str:
    """Build a markdown document with a front-matter block."""
    lines = ["---", *(f"{key}: {value}" for key, value in metadata.items()), "---", "", "Body text."]
    return "\n".join(lines)
