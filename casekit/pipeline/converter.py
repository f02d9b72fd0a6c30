"""Case conversion pipeline orchestration.

Responsibilities:
- Compose validate, normalize, tokenize and format stages in strict order.
- Expose module-level converters backed by a shared stateless pipeline.

Key public names:
- `CaseConverter`: pipeline object with optional stage logging.
- `to_camel_case`, `to_kebab_case`, `to_dot_case`, `convert_case`.
"""

from __future__ import annotations

from ..models.datatypes import CaseFormat, ConversionReport
from ..parsing import parse_case_format
from ..telemetry.logger import RunLogger
from ..text.formatter import CaseFormatter
from ..text.normalizer import TextNormalizer
from ..text.tokenizer import Tokenizer
from ..text.validator import ensure_string
from .telemetry import PipelineTelemetryMixin


class CaseConverter(PipelineTelemetryMixin):
    """Coordinate all stages for converting one value to a target format."""

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        tokenizer: Tokenizer | None = None,
        formatter: CaseFormatter | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize stage components and optional stage logging."""

        self._normalizer = normalizer or TextNormalizer()
        self._tokenizer = tokenizer or Tokenizer()
        self._formatter = formatter or CaseFormatter()
        self._run_logger = run_logger

    def explain(self, value: object, case_format: CaseFormat | str) -> ConversionReport:
        """Run every stage and return intermediate values with the output.

        Raises:
            InvalidInputType: If `value` is not a string.
            ValueError: If `case_format` names no supported format.
        """

        source = self._run_stage("validate", lambda: ensure_string(value))
        resolved_format = parse_case_format(case_format)
        normalized = self._run_stage(
            "normalize",
            lambda: self._normalizer.normalize(source),
            lambda text: {"chars": len(text)},
        )
        if not normalized:
            return ConversionReport(
                source=source,
                normalized="",
                tokens=(),
                case_format=resolved_format,
                output="",
            )

        tokens = self._run_stage(
            "tokenize",
            lambda: self._tokenizer.tokenize(normalized),
            lambda result: {"tokens": len(result)},
        )
        output = self._run_stage(
            "format",
            lambda: self._formatter.format(tokens, resolved_format),
            lambda _: {"case_format": resolved_format.value},
        )
        return ConversionReport(
            source=source,
            normalized=normalized,
            tokens=tokens,
            case_format=resolved_format,
            output=output,
        )

    def convert(self, value: object, case_format: CaseFormat | str) -> str:
        """Convert `value` to `case_format` and return the formatted string."""

        return self.explain(value, case_format).output


_DEFAULT_CONVERTER = CaseConverter()


def convert_case(value: object, case_format: CaseFormat | str) -> str:
    """Convert `value` to a format given as `CaseFormat` or textual alias."""

    return _DEFAULT_CONVERTER.convert(value, case_format)


def to_camel_case(value: object) -> str:
    """Convert a string to camelCase, e.g. `"first name"` -> `"firstName"`."""

    return _DEFAULT_CONVERTER.convert(value, CaseFormat.CAMEL)


def to_kebab_case(value: object) -> str:
    """Convert a string to kebab-case, e.g. `"SCREEN_NAME"` -> `"screen-name"`."""

    return _DEFAULT_CONVERTER.convert(value, CaseFormat.KEBAB)


def to_dot_case(value: object) -> str:
    """Convert a string to dot.case, e.g. `"mobile-number"` -> `"mobile.number"`."""

    return _DEFAULT_CONVERTER.convert(value, CaseFormat.DOT)
