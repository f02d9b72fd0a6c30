"""Shared parsing helpers for config and CLI value normalization."""

from __future__ import annotations

from .models.datatypes import CaseFormat


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_CASE_FORMAT_ALIASES = {
    "camel": CaseFormat.CAMEL,
    "camelcase": CaseFormat.CAMEL,
    "camel-case": CaseFormat.CAMEL,
    "kebab": CaseFormat.KEBAB,
    "kebabcase": CaseFormat.KEBAB,
    "kebab-case": CaseFormat.KEBAB,
    "dot": CaseFormat.DOT,
    "dotcase": CaseFormat.DOT,
    "dot.case": CaseFormat.DOT,
    "dot-case": CaseFormat.DOT,
}


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary config or CLI value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_case_format(value: object, field_name: str = "case_format") -> CaseFormat:
    """Resolve a `CaseFormat` member or a case-insensitive textual alias.

    Args:
        value: `CaseFormat` member or alias such as `kebab-case` or `DOT`.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is blank or names no supported format.
    """

    if isinstance(value, CaseFormat):
        return value

    normalized = normalize_optional_string(value)
    resolved = _CASE_FORMAT_ALIASES.get(normalized.lower()) if normalized else None
    if resolved is None:
        supported = ", ".join(member.value for member in CaseFormat)
        raise ValueError(
            f"Unsupported `{field_name}` value `{value}`; supported: {supported}."
        )
    return resolved
