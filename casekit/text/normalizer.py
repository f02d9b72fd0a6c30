"""Text normalization stage.

Responsibilities:
- Trim surrounding whitespace before tokenization.
- Replace punctuation, symbols, hyphens and underscores with word-boundary spaces.
- Keep normalization ASCII-only and locale-independent.
"""

from __future__ import annotations

import re
from typing import Protocol


class NormalizerRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class TrimWhitespace:
    """Strip leading and trailing whitespace."""

    def apply(self, text: str) -> str:
        """Apply trim rule."""

        return text.strip()


class ReplaceSeparators:
    """Replace every non-alphanumeric, non-whitespace character with one space."""

    _SEPARATOR_RE = re.compile(r"[^A-Za-z0-9\s]")

    def apply(self, text: str) -> str:
        """Apply separator replacement rule, one space per replaced character."""

        return self._SEPARATOR_RE.sub(" ", text)


class TextNormalizer:
    """Apply a sequence of normalization rules to validated input text."""

    def __init__(self, rules: list[NormalizerRule] | None = None) -> None:
        """Initialize with custom rules or the default trim-then-replace sequence."""

        self.rules = rules if rules is not None else [
            TrimWhitespace(),
            ReplaceSeparators(),
        ]

    def normalize(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
