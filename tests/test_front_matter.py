"""Unit tests for the minimal front-matter parser."""

from app.utils.front_matter import extract_front_matter_block, parse_front_matter


class TestExtractFrontMatterBlock:
    """Locating the leading metadata region."""

    def test_block_at_start_is_found(self) -> None:
        text = "---\ntitle: Foo\ndate: 2024-05-01\n---\n# Heading\n"
        assert extract_front_matter_block(text) == "title: Foo\ndate: 2024-05-01"

    def test_no_block_returns_none(self) -> None:
        assert extract_front_matter_block("# Just a heading\n\ntext") is None

    def test_block_not_at_start_is_ignored(self) -> None:
        text = "Intro paragraph\n---\ntitle: Foo\n---\n"
        assert extract_front_matter_block(text) is None

    def test_unterminated_block_returns_none(self) -> None:
        assert extract_front_matter_block("---\ntitle: Foo\nno closing delimiter") is None

    def test_block_ends_at_first_closing_delimiter(self) -> None:
        text = "---\ntitle: Foo\n---\nbody\n---\nmore\n"
        assert extract_front_matter_block(text) == "title: Foo"

    def test_crlf_newlines(self) -> None:
        text = "---\r\ntitle: Foo\r\n---\r\nbody"
        assert parse_front_matter(extract_front_matter_block(text)) == {"title": "Foo"}


class TestParseFrontMatter:
    """Line-oriented key: value parsing."""

    def test_round_trip_of_typical_block(self) -> None:
        block = 'title: "Foo"\ndescription: Bar\ndate: 2024-05-01\nshow: true'
        assert parse_front_matter(block) == {
            "title": "Foo",
            "description": "Bar",
            "date": "2024-05-01",
            "show": "true",
        }

    def test_double_quotes_are_stripped(self) -> None:
        assert parse_front_matter('title: "Hello World"') == {"title": "Hello World"}

    def test_single_quotes_are_stripped(self) -> None:
        assert parse_front_matter("title: 'Hello World'") == {"title": "Hello World"}

    def test_unquoted_value_is_kept(self) -> None:
        assert parse_front_matter("title: Hello World") == {"title": "Hello World"}

    def test_mismatched_quotes_are_left_alone(self) -> None:
        assert parse_front_matter('title: "Hello') == {"title": '"Hello'}
        assert parse_front_matter("title: \"Hello'") == {"title": "\"Hello'"}

    def test_inner_quotes_survive(self) -> None:
        assert parse_front_matter('title: "Say "hi""') == {"title": 'Say "hi"'}

    def test_whitespace_is_trimmed(self) -> None:
        assert parse_front_matter("title:    Padded value   ") == {"title": "Padded value"}

    def test_empty_value(self) -> None:
        assert parse_front_matter("description:") == {"description": ""}

    def test_value_may_contain_colons(self) -> None:
        assert parse_front_matter("url: https://example.com/a") == {"url": "https://example.com/a"}

    def test_non_matching_lines_are_skipped(self) -> None:
        block = "# comment\n- list item\n  nested: value\nmulti-word key: x\ntitle: Kept"
        assert parse_front_matter(block) == {"title": "Kept"}

    def test_last_duplicate_wins(self) -> None:
        assert parse_front_matter("title: First\ntitle: Second") == {"title": "Second"}

    def test_values_are_not_type_coerced(self) -> None:
        result = parse_front_matter("show: false\ncount: 3")
        assert result == {"show": "false", "count": "3"}

    def test_empty_block(self) -> None:
        assert parse_front_matter("") == {}
