"""Minimal front-matter extraction for markdown articles.

Only flat, single-line ``key: value`` pairs are understood. Multi-line
values, nested mappings, lists and every other YAML construct are either
skipped or read verbatim as a plain string. That limitation is deliberate:
articles only carry a handful of scalar fields (title, description, date,
show) and no YAML library is pulled in for them.
"""

from __future__ import annotations

import re

# Opening delimiter at the very start, then the shortest run up to the next one
_BLOCK_RE = re.compile(r"^---\s*([\s\S]*?)\s*---")
_LINE_RE = re.compile(r"^(\w+):\s*(.*)$", re.ASCII)


def extract_front_matter_block(text: str) -> str | None:
    """Return the raw text between the leading ``---`` delimiters.

    Args:
        text: Full markdown document.

    Returns:
        The delimited region (surrounding whitespace removed), or None when
        the document does not start with a metadata block.

    Examples:
        >>> extract_front_matter_block("---\\ntitle: Foo\\n---\\nbody")
        'title: Foo'
        >>> extract_front_matter_block("# No metadata") is None
        True
    """
    match = _BLOCK_RE.match(text)
    if match is None:
        return None
    return match.group(1)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_front_matter(block: str) -> dict[str, str]:
    """Parse ``key: value`` lines into a mapping.

    Lines that do not look like ``word_chars: value`` are ignored. A value
    wrapped in one matching pair of double or single quotes loses those
    quotes; anything else (including a stray leading quote) is kept as is.
    Later keys overwrite earlier ones.

    Args:
        block: Text of the metadata region.

    Returns:
        dict[str, str]: Parsed metadata; values are never type-coerced.

    Examples:
        >>> parse_front_matter('title: "Hello World"\\nshow: false')
        {'title': 'Hello World', 'show': 'false'}
        >>> parse_front_matter('title: "Hello')
        {'title': '"Hello'}
    """
    metadata: dict[str, str] = {}
    for line in block.split("\n"):
        match = _LINE_RE.match(line)
        if match is None:
            continue
        key = match.group(1).strip()
        metadata[key] = _strip_quotes(match.group(2).strip())
    return metadata
