"""Test snippet generation."""

import pytest

from docsearch.search.snippet import Snippet, build_snippet, highlight


class TestBuildSnippet:
    """Test snippet boundaries and highlight offsets."""

    def test_short_text_is_kept_whole(self):
        text = "the quick brown fox jumps"
        snippet = build_snippet(text, 4, 19)
        assert snippet == Snippet(snippet=text, match_index=4, highlight_length=15)

    def test_ellipsis_on_both_sides(self):
        text = "x" * 100 + "target" + "y" * 100
        snippet = build_snippet(text, 100, 106, context_radius=10)
        assert snippet.snippet == "..." + "x" * 10 + "target" + "y" * 10 + "..."
        assert snippet.match_index == 13
        assert snippet.highlight_length == 6
        start = snippet.match_index
        assert snippet.snippet[start : start + snippet.highlight_length] == "target"

    def test_ellipsis_only_where_text_was_cut(self):
        text = "target" + "y" * 200
        snippet = build_snippet(text, 0, 6, context_radius=5)
        assert snippet.snippet == "target" + "y" * 5 + "..."
        assert snippet.match_index == 0

    def test_default_radius_is_80(self):
        text = "a" * 200 + "match" + "b" * 200
        snippet = build_snippet(text, 200, 205)
        assert snippet.snippet == "..." + "a" * 80 + "match" + "b" * 80 + "..."

    def test_zero_length_match_highlights_one_character(self):
        snippet = build_snippet("abcdefghij", 5, 5, context_radius=0)
        assert snippet.snippet == "......"
        assert snippet.match_index == 3
        assert snippet.highlight_length == 1

    def test_highlight_never_runs_past_snippet(self):
        snippet = build_snippet("abc", 3, 3, context_radius=0)
        assert snippet.snippet == "..."
        assert snippet.match_index + snippet.highlight_length <= len(snippet.snippet)

    def test_empty_text(self):
        snippet = build_snippet("", 0, 0)
        assert snippet == Snippet(snippet="", match_index=0, highlight_length=0)

    def test_negative_radius_is_rejected(self):
        with pytest.raises(ValueError):
            build_snippet("text", 0, 1, context_radius=-1)

    @pytest.mark.parametrize("radius", [0, 1, 5, 80])
    @pytest.mark.parametrize("bounds", [(0, 3), (10, 14), (20, 25), (7, 7)])
    def test_bounds_invariant(self, radius, bounds):
        text = "lorem ipsum dolor sit amet consectetur"
        snippet = build_snippet(text, bounds[0], bounds[1], context_radius=radius)
        assert snippet.match_index >= 0
        assert snippet.match_index + snippet.highlight_length <= len(snippet.snippet)


class TestHighlight:
    """Test HTML highlighting of a snippet."""

    def test_wraps_match_in_mark(self):
        assert highlight("the quick brown fox", 4, 5) == "the <mark>quick</mark> brown fox"

    def test_escapes_html(self):
        assert highlight("a <b> c", 2, 3) == "a <mark>&lt;b&gt;</mark> c"

    def test_custom_tags(self):
        assert highlight("abc", 1, 1, "[", "]") == "a[b]c"
