"""casekit pipeline package.

This package composes the text stages into the conversion pipeline and
exposes the module-level converters.
"""

from .converter import (
    CaseConverter,
    convert_case,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)

__all__ = [
    "CaseConverter",
    "convert_case",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]
