"""Per-format token casing and joining stage.

Responsibilities:
- Map each token through the casing rule of the target format.
- Join cased tokens with the format-specific separator.

Key types:
- `FormatRule`: casing callables and joiner for one target format.
- `CaseFormatter`: applies the registered rule for a `CaseFormat`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..models.datatypes import CaseFormat


def _lower(token: str) -> str:
    """Return the token lowercased."""

    return token.lower()


def _capitalize(token: str) -> str:
    """Uppercase the first character and lowercase the rest.

    A leading digit has no case, so numeric tokens pass through unchanged.
    """

    return token[:1].upper() + token[1:].lower()


@dataclass(frozen=True, slots=True)
class FormatRule:
    """Casing and joining rule for one target format.

    Attributes:
        first_token: Casing applied to the first token.
        other_tokens: Casing applied to every following token.
        joiner: Separator placed between cased tokens.
    """

    first_token: Callable[[str], str]
    other_tokens: Callable[[str], str]
    joiner: str

    def apply(self, tokens: Sequence[str]) -> str:
        """Case every token by position and join the result."""

        cased = [
            self.first_token(token) if index == 0 else self.other_tokens(token)
            for index, token in enumerate(tokens)
        ]
        return self.joiner.join(cased)


DEFAULT_FORMAT_RULES: dict[CaseFormat, FormatRule] = {
    CaseFormat.CAMEL: FormatRule(first_token=_lower, other_tokens=_capitalize, joiner=""),
    CaseFormat.KEBAB: FormatRule(first_token=_lower, other_tokens=_lower, joiner="-"),
    CaseFormat.DOT: FormatRule(first_token=_lower, other_tokens=_lower, joiner="."),
}


class CaseFormatter:
    """Format token sequences using per-format rules."""

    def __init__(self, rules: dict[CaseFormat, FormatRule] | None = None) -> None:
        """Initialize with custom rules or the default camel/kebab/dot set."""

        self.rules = dict(DEFAULT_FORMAT_RULES if rules is None else rules)

    def format(self, tokens: Sequence[str], case_format: CaseFormat) -> str:
        """Return tokens cased and joined for `case_format`."""

        try:
            rule = self.rules[case_format]
        except KeyError as exc:
            raise ValueError(f"No format rule registered for `{case_format}`.") from exc
        return rule.apply(tokens)
