"""
Snippet Generation for Search Results

Cuts a bounded excerpt of the original page text around a matched window
and records where the match sits inside the excerpt for highlighting.
"""

import html
from dataclasses import dataclass

from docsearch.core.constants import DEFAULT_CONTEXT_RADIUS, ELLIPSIS


@dataclass(frozen=True)
class Snippet:
    """A text excerpt with the position of the highlighted match."""

    snippet: str  # Excerpt, with "..." where text was cut off
    match_index: int  # Offset of the match inside snippet
    highlight_length: int


def build_snippet(
    text: str,
    match_start: int,
    match_end: int,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> Snippet:
    """
    Build a snippet around text[match_start:match_end].

    Args:
        text: Original page text (index-aligned with the normalized text
            the match offsets come from)
        match_start: Start of the match, 0 <= match_start <= match_end
        match_end: End of the match (exclusive), <= len(text)
        context_radius: Characters of context kept on each side

    Returns:
        Snippet whose highlight never runs past the end of the excerpt
    """
    if context_radius < 0:
        raise ValueError(f"context_radius must be >= 0, got {context_radius}")

    snippet_start = max(0, match_start - context_radius)
    snippet_end = min(len(text), match_end + context_radius)
    prefix = ELLIPSIS if snippet_start > 0 else ""
    suffix = ELLIPSIS if snippet_end < len(text) else ""

    snippet = f"{prefix}{text[snippet_start:snippet_end]}{suffix}"
    match_index = len(prefix) + (match_start - snippet_start)
    highlight_length = max(match_end - match_start, 1)

    return Snippet(
        snippet=snippet,
        match_index=match_index,
        highlight_length=max(min(highlight_length, len(snippet) - match_index), 0),
    )


def highlight(
    snippet: str,
    match_index: int,
    highlight_length: int,
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
) -> str:
    """Return HTML-escaped snippet with the match wrapped in open/close tags."""
    end = match_index + highlight_length
    return (
        html.escape(snippet[:match_index])
        + open_tag
        + html.escape(snippet[match_index:end])
        + close_tag
        + html.escape(snippet[end:])
    )
