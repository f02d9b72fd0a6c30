"""Top-level package for casekit.

This package converts free-form strings into camelCase, kebab-case and
dot.case through one shared validate, normalize, tokenize and format
pipeline. The module-level converters are the main entry points;
`CaseConverter` exposes the pipeline with optional stage logging.
"""

from .errors import InvalidInputType
from .models import CaseFormat, ConversionReport
from .pipeline import (
    CaseConverter,
    convert_case,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)

__all__ = [
    "CaseConverter",
    "CaseFormat",
    "ConversionReport",
    "InvalidInputType",
    "__version__",
    "convert_case",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]

__version__ = "0.1.0"
