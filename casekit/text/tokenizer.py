"""Word tokenization stage."""

from __future__ import annotations

import re


class Tokenizer:
    """Split normalized text into ordered, non-empty word tokens."""

    _WHITESPACE_RE = re.compile(r"\s+")

    def tokenize(self, text: str) -> tuple[str, ...]:
        """Split on whitespace runs, dropping empty edge fragments."""

        return tuple(token for token in self._WHITESPACE_RE.split(text) if token)
