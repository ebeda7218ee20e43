"""
Text Analyzer

Normalizes page text and queries (case folding) and extracts query tokens.
Used by both the indexer (page normalization) and the searcher (queries).
"""

import re

# Token alphabet: Latin, Cyrillic and digits. Everything else is a delimiter.
TOKEN_PATTERN = re.compile(r"[a-zA-Zа-яА-ЯёЁ0-9]+")
CASE_BOUNDARY_PATTERN = re.compile(r"([a-zа-яё])([A-ZА-ЯЁ])")
SPLIT_PATTERN = re.compile(r"[\s_]+")


class TextAnalyzer:
    def __init__(self, min_split_length: int = 2):
        # Sub-parts from the camel/snake split shorter than this are noise
        self.min_split_length = min_split_length

    def normalize(self, text: str) -> str:
        """
        Lower-case text without changing its length.

        Offsets found in the normalized text are used to slice the original
        text, so every character must map to exactly one character. The rare
        characters whose lower-case form is longer (e.g. "İ") are kept as is.
        """
        lowered = text.lower()
        if len(lowered) == len(text):
            return lowered
        return "".join(
            low if len(low) == 1 else char
            for char, low in ((c, c.lower()) for c in text)
        )

    def tokenize(self, text: str) -> list[str]:
        """
        Extract distinct search tokens, in order of first appearance.

        Every word-like run is a token. Runs are also split at camel-case
        boundaries and underscores, and parts longer than one character are
        added as well, so "главаТекста" yields "главатекста", "глава" and
        "текста". Output tokens are always normalized.
        """
        seen: dict[str, None] = {}
        for match in TOKEN_PATTERN.finditer(text):
            raw = match.group(0)
            normalized = self.normalize(raw)
            if normalized:
                seen.setdefault(normalized, None)

            spaced = CASE_BOUNDARY_PATTERN.sub(r"\1 \2", raw)
            for part in SPLIT_PATTERN.split(spaced):
                part = self.normalize(part)
                if len(part) >= self.min_split_length:
                    seen.setdefault(part, None)
        return list(seen)


# Global instance
analyzer = TextAnalyzer()


def normalize(text: str) -> str:
    return analyzer.normalize(text)


def tokenize(text: str) -> list[str]:
    return analyzer.tokenize(text)
