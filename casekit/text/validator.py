"""Input validation stage.

Responsibilities:
- Reject any converter input whose runtime type is not `str`.
"""

from __future__ import annotations

from ..errors import InvalidInputType


def ensure_string(value: object) -> str:
    """Return `value` unchanged when it is a string, else raise `InvalidInputType`."""

    if not isinstance(value, str):
        raise InvalidInputType(value)
    return value
