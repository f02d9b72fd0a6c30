"""Domain exceptions for case conversion and CLI diagnostics."""

from __future__ import annotations


class InvalidInputType(TypeError):
    """Raised when a converter receives a value that is not a string."""

    def __init__(self, value: object) -> None:
        """Initialize the error with the rejected value's type name."""

        super().__init__("Input must be a string")
        self.type_name = type(value).__name__


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
