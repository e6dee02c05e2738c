"""Session Calculator - console arithmetic with session history.

An interactive calculator that keeps every calculation session in memory:
- Seed a session and apply + - * / % to the running result
- Start new sessions without losing earlier ones
- Browse stored sessions and their step-by-step history
"""

__version__ = "1.0.0"

from .errors import (
    CalculatorError,
    EvaluationError,
    DivisionByZero,
    ModuloByZero,
    UnsupportedOperation,
    SessionStoreError,
    NoActiveSession,
    IndexOutOfRange,
)
from .evaluator import (
    Operation,
    calculate,
)
from .session_store import (
    CalculationRecord,
    SessionStore,
    SessionSummary,
)
from .config import CalculatorConfig
from .repl import (
    CalculatorRepl,
    ReplState,
)

__all__ = [
    # Errors
    "CalculatorError",
    "EvaluationError",
    "DivisionByZero",
    "ModuloByZero",
    "UnsupportedOperation",
    "SessionStoreError",
    "NoActiveSession",
    "IndexOutOfRange",
    # Evaluation
    "Operation",
    "calculate",
    # Session store
    "CalculationRecord",
    "SessionStore",
    "SessionSummary",
    # REPL
    "CalculatorConfig",
    "CalculatorRepl",
    "ReplState",
]
