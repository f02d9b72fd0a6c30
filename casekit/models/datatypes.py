"""Core datatypes shared across casekit modules.

Responsibilities:
- Name the supported target formats with stable identifiers.
- Represent the immutable record produced by one traced conversion.

Key types:
- `CaseFormat`, `ConversionReport`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CaseFormat(str, Enum):
    """Target output formats with stable textual identifiers."""

    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"

    @property
    def label(self) -> str:
        """Return the conventional spelling of the format name."""

        return _FORMAT_LABELS[self]


_FORMAT_LABELS = {
    CaseFormat.CAMEL: "camelCase",
    CaseFormat.KEBAB: "kebab-case",
    CaseFormat.DOT: "dot.case",
}


@dataclass(frozen=True, slots=True)
class ConversionReport:
    """Intermediate and final values of one conversion.

    Attributes:
        source: Validated input text as supplied by the caller.
        normalized: Trimmed text with separators replaced by spaces.
        tokens: Ordered non-empty word tokens.
        case_format: Target format applied by the formatter.
        output: Final formatted string.
    """

    source: str
    normalized: str
    tokens: tuple[str, ...]
    case_format: CaseFormat
    output: str
