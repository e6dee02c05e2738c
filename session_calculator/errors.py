"""Exceptions raised by Session Calculator.

Everything the calculator raises on purpose derives from CalculatorError, so
callers can report it to the user as a plain message. Arithmetic failures
also derive from the matching builtin so code that only knows about
ZeroDivisionError or IndexError keeps working.
"""


class CalculatorError(Exception):
    """Base class for all user-facing calculator errors."""

    default_message = "Calculator error."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


# --- Evaluation ---


class EvaluationError(CalculatorError):
    """An arithmetic operation could not produce a value."""


class DivisionByZero(EvaluationError, ZeroDivisionError):
    default_message = "Division by zero is undefined."


class ModuloByZero(EvaluationError, ZeroDivisionError):
    default_message = "Modulo by zero is undefined."


class UnsupportedOperation(EvaluationError, ValueError):
    default_message = "Unsupported operation."


# --- Session store ---


class SessionStoreError(CalculatorError):
    """The session store was asked for something it does not hold."""


class NoActiveSession(SessionStoreError):
    default_message = "No active calculation session."


class IndexOutOfRange(SessionStoreError, IndexError):
    default_message = "Selection out of range."


__all__ = [
    "CalculatorError",
    "EvaluationError",
    "DivisionByZero",
    "ModuloByZero",
    "UnsupportedOperation",
    "SessionStoreError",
    "NoActiveSession",
    "IndexOutOfRange",
]
