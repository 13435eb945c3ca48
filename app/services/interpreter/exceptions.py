"""Exceptions for the emoji interpretation pipeline."""

from typing import Literal

InterpreterErrorCode = Literal["CONFIG_ERROR", "PARSE_ERROR", "API_ERROR", "TIMEOUT"]


class InterpreterError(Exception):
    """Base error for a failed interpretation. No partial result is ever attached."""

    def __init__(self, message: str, code: InterpreterErrorCode):
        self.message = message
        self.code = code
        super().__init__(message)


class InterpreterConfigError(InterpreterError):
    """The provider credential is missing or the interpreter is switched off."""

    def __init__(self, message: str = "ANTHROPIC_API_KEY is not configured"):
        super().__init__(message, code="CONFIG_ERROR")


class ResponseValidationError(InterpreterError):
    """The model output is not valid JSON or does not match the response schema.

    `issues` holds one "path: message" string per schema violation, so callers
    can log exactly what the model got wrong.
    """

    def __init__(self, message: str, issues: list[str] | None = None):
        self.issues = issues or []
        super().__init__(message, code="PARSE_ERROR")


class ProviderError(InterpreterError):
    """The provider returned nothing usable or did not answer in time."""

    def __init__(self, message: str, code: InterpreterErrorCode = "API_ERROR"):
        super().__init__(message, code=code)
