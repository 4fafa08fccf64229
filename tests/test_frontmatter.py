"""Tests for the frontmatter model."""

import pytest

from vault_publisher.core.frontmatter import (
    CONTINUATION,
    SCALAR,
    classify_line,
    fill_field,
    has_field,
    insert_field,
    parse,
    parse_value,
    set_missing_field,
)


class TestClassifyLine:
    """Tests for the line classifier."""

    def test_key_value_is_scalar(self):
        assert classify_line("title: My Note") == SCALAR

    def test_bare_key_is_scalar(self):
        assert classify_line("tags:") == SCALAR

    def test_dash_item_is_continuation(self):
        assert classify_line("  - evergreen") == CONTINUATION

    def test_other_lines_ignored(self):
        assert classify_line("") is None
        assert classify_line("just words") is None


class TestParseValue:
    """Tests for value parsing."""

    def test_plain_string(self):
        assert parse_value(" hello world ") == "hello world"

    def test_bracket_list(self):
        assert parse_value(" [a, b ,c]") == ["a", "b", "c"]

    def test_single_element_bracket_is_list(self):
        assert parse_value(" [#publish]") == ["#publish"]

    def test_quotes_kept(self):
        assert parse_value(" 'quoted'") == "'quoted'"


class TestParse:
    """Tests for frontmatter parsing."""

    def test_no_frontmatter(self):
        assert parse("# Just a heading\n\nBody") is None

    def test_block_not_at_start(self):
        assert parse("intro\n---\ntitle: x\n---\n") is None

    def test_unclosed_block(self):
        assert parse("---\ntitle: x\nbody without closing") is None

    def test_scalars(self):
        text = "---\ntitle: Hello\ndate: 2024-01-05\n---\nBody"
        assert parse(text) == {"title": "Hello", "date": "2024-01-05"}

    def test_inline_list(self):
        text = "---\ntags: [#publish, #journal]\n---\n"
        assert parse(text) == {"tags": ["#publish", "#journal"]}

    def test_block_list(self):
        text = "---\ntags:\n  - evergreen\n  - domain/cs\ntitle: T\n---\n"
        result = parse(text)
        assert result["tags"] == ["evergreen", "domain/cs"]
        assert result["title"] == "T"

    def test_value_with_colons(self):
        text = "---\nsource: https://example.com/a:b\n---\n"
        assert parse(text) == {"source": "https://example.com/a:b"}

    def test_last_assignment_wins(self):
        text = "---\ntitle: First\ntitle: Second\n---\n"
        assert parse(text) == {"title": "Second"}

    def test_keys_are_case_sensitive(self):
        text = "---\nTitle: Upper\ntitle: lower\n---\n"
        assert parse(text) == {"Title": "Upper", "title": "lower"}

    def test_dash_line_before_any_key_ignored(self):
        text = "---\n- stray\ntitle: x\n---\n"
        assert parse(text) == {"title": "x"}

    def test_continuation_replaces_scalar(self):
        text = "---\naliases: old\n  - /new\n---\n"
        assert parse(text) == {"aliases": ["/new"]}

    def test_quotes_not_stripped(self):
        text = "---\ntitle: 'Quoted Title'\ntags: ['a', 'b']\n---\n"
        result = parse(text)
        assert result["title"] == "'Quoted Title'"
        assert result["tags"] == ["'a'", "'b'"]


class TestHasField:
    """Tests for field presence checks."""

    def test_none_frontmatter(self):
        assert not has_field(None, "date")

    def test_present(self):
        assert has_field({"date": "2024-01-01"}, "date")

    def test_empty_value_counts_as_missing(self):
        assert not has_field({"date": ""}, "date")


class TestInsertField:
    """Tests for raw-text field insertion."""

    def test_insert_after_opening_delimiter(self):
        text = "---\ntitle: x\n---\nBody\n"
        assert insert_field(text, "date", "2024-01-05") == "---\ndate: 2024-01-05\ntitle: x\n---\nBody\n"

    def test_only_first_delimiter(self):
        text = "---\ntitle: x\n---\nBody\n---\nMore\n"
        result = insert_field(text, "date", "2024-01-05")
        assert result.count("date:") == 1
        assert result.endswith("---\nBody\n---\nMore\n")

    def test_no_frontmatter_unchanged(self):
        text = "Body only\n"
        assert insert_field(text, "date", "2024-01-05") == text

    @pytest.mark.parametrize("value", ["my first post", "with: colon"])
    def test_round_trip_through_parse(self, value):
        text = "---\ndate: 2024-01-05\n---\nBody"
        result = parse(insert_field(text, "title", value))
        assert result["title"] == value
        assert result["date"] == "2024-01-05"


class TestFillField:
    """Tests for filling empty fields in place."""

    def test_fills_empty_line(self):
        text = "---\ndate:\ntitle: x\n---\nBody"
        assert fill_field(text, "date", "2024-01-05") == "---\ndate: 2024-01-05\ntitle: x\n---\nBody"

    def test_trailing_whitespace_counts_as_empty(self):
        text = "---\ndate: \t\n---\n"
        assert fill_field(text, "date", "2024-01-05") == "---\ndate: 2024-01-05\n---\n"

    def test_set_value_untouched(self):
        text = "---\ndate: 2020-02-02\n---\n"
        assert fill_field(text, "date", "2024-01-05") == text

    def test_body_untouched(self):
        text = "---\ntitle: x\n---\ndate:\n"
        assert fill_field(text, "date", "2024-01-05") == text

    def test_similar_key_untouched(self):
        text = "---\nupdate:\n---\n"
        assert fill_field(text, "date", "2024-01-05") == text


class TestSetMissingField:
    """Tests for the add-if-missing decision."""

    def test_absent_key_inserted(self):
        text = "---\ntitle: x\n---\n"
        assert set_missing_field(text, parse(text), "date", "d") == "---\ndate: d\ntitle: x\n---\n"

    def test_empty_key_filled(self):
        text = "---\ndate:\ntitle: x\n---\n"
        assert set_missing_field(text, parse(text), "date", "d") == "---\ndate: d\ntitle: x\n---\n"

    def test_present_key_kept(self):
        text = "---\ndate: 2020-02-02\n---\n"
        assert set_missing_field(text, parse(text), "date", "d") == text

    def test_no_frontmatter_unchanged(self):
        text = "Body only\n"
        assert set_missing_field(text, parse(text), "date", "d") == text
