"""
Error types raised by the generative model integration.
"""
from expense_ai.domains.enums import GenerationErrorKind


class GenerationError(Exception):
    """A generative model call that produced no usable result."""

    def __init__(self, kind: GenerationErrorKind, message: str = ""):
        self.kind = kind
        super().__init__(message or kind.value)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.args[0]}"
