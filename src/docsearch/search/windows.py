"""
Proximity Window Finder

Finds the minimal spans of a page that contain at least one occurrence of
every query token ("smallest range covering all lists" over token
occurrence positions). Tightest windows come first, so snippets are built
around the densest cluster of query tokens rather than the first hit.
"""

from collections import deque
from dataclasses import dataclass
from typing import NamedTuple, Sequence


@dataclass(frozen=True, order=True)
class MatchWindow:
    """Half-open span [start, end) of a page's normalized text."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start


class Occurrence(NamedTuple):
    start: int
    end: int
    token_index: int


def find_occurrences(text: str, token: str) -> list[int]:
    """
    Start offsets of token in text, scanning without overlap.

    After a match at i the scan resumes at i + len(token).
    """
    if not token:
        return []
    positions = []
    start = 0
    while True:
        index = text.find(token, start)
        if index == -1:
            break
        positions.append(index)
        start = index + len(token)
    return positions


def find_windows(text: str, tokens: Sequence[str]) -> list[MatchWindow]:
    """
    Find all distinct minimal windows covering every token.

    Args:
        text: Normalized page text
        tokens: Distinct normalized tokens (all required)

    Returns:
        Windows sorted by width, then start. Empty if tokens is empty or any
        token does not occur in text.
    """
    if not tokens:
        return []

    occurrences: list[Occurrence] = []
    for token_index, token in enumerate(tokens):
        positions = find_occurrences(text, token)
        if not positions:
            return []
        occurrences.extend(
            Occurrence(pos, pos + len(token), token_index) for pos in positions
        )

    occurrences.sort(key=lambda occ: occ.start)

    required = len(tokens)
    counts = [0] * required
    covered = 0
    left = 0
    # Indices into occurrences with decreasing end: front is the window's max end
    max_ends: deque[int] = deque()
    seen: set[tuple[int, int]] = set()
    windows: list[MatchWindow] = []

    for right, occurrence in enumerate(occurrences):
        if counts[occurrence.token_index] == 0:
            covered += 1
        counts[occurrence.token_index] += 1

        while max_ends and occurrences[max_ends[-1]].end <= occurrence.end:
            max_ends.pop()
        max_ends.append(right)

        while covered == required:
            start = occurrences[left].start
            end = occurrences[max_ends[0]].end
            if (start, end) not in seen:
                seen.add((start, end))
                windows.append(MatchWindow(start, end))

            left_token = occurrences[left].token_index
            counts[left_token] -= 1
            if counts[left_token] == 0:
                covered -= 1
            if max_ends[0] == left:
                max_ends.popleft()
            left += 1

    windows.sort(key=lambda w: (w.width, w.start))
    return windows
