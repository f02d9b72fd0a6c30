"""Text pipeline stages for case conversion.

This package provides the validator, normalizer, tokenizer and formatter
building blocks composed by `casekit.pipeline.CaseConverter`.
"""

from .formatter import DEFAULT_FORMAT_RULES, CaseFormatter, FormatRule
from .normalizer import ReplaceSeparators, TextNormalizer, TrimWhitespace
from .tokenizer import Tokenizer
from .validator import ensure_string

__all__ = [
    "CaseFormatter",
    "DEFAULT_FORMAT_RULES",
    "FormatRule",
    "ReplaceSeparators",
    "TextNormalizer",
    "Tokenizer",
    "TrimWhitespace",
    "ensure_string",
]
