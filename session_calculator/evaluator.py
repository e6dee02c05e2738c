"""Binary arithmetic for the calculator.

Operations work on floats and follow IEEE semantics: overflow produces
inf/nan rather than an exception. Only a zero divisor and an unknown
operator are treated as errors.
"""

import logging
import math
from enum import Enum
from typing import Union

from .errors import DivisionByZero, ModuloByZero, UnsupportedOperation


logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Binary operations, keyed by the symbol the user types."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: Union[str, "Operation"]) -> "Operation":
        """Resolve a symbol to an Operation.

        Raises:
            UnsupportedOperation: If the symbol is not one of + - * / %.
        """
        try:
            return cls(symbol)
        except ValueError:
            raise UnsupportedOperation() from None


def add(lhs: float, rhs: float) -> float:
    """Add two numbers."""
    return lhs + rhs


def subtract(lhs: float, rhs: float) -> float:
    """Subtract rhs from lhs."""
    return lhs - rhs


def multiply(lhs: float, rhs: float) -> float:
    """Multiply two numbers."""
    return lhs * rhs


def divide(lhs: float, rhs: float) -> float:
    """Divide lhs by rhs.

    Raises:
        DivisionByZero: If rhs is zero.
    """
    if rhs == 0.0:
        raise DivisionByZero()
    return lhs / rhs


def modulo(lhs: float, rhs: float) -> float:
    """Return the floating-point remainder of lhs by rhs.

    The result carries the sign of lhs, like C fmod.

    Raises:
        ModuloByZero: If rhs is zero.
    """
    if rhs == 0.0:
        raise ModuloByZero()
    # math.fmod rejects an infinite dividend; C fmod returns nan for it
    if math.isinf(lhs):
        return math.nan
    return math.fmod(lhs, rhs)


_DISPATCH = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.MODULO: modulo,
}


def calculate(lhs: float, rhs: float, operation: Union[str, Operation]) -> float:
    """Apply operation to lhs and rhs.

    Args:
        lhs: Left operand, usually the running result.
        rhs: Right operand entered by the user.
        operation: An Operation or its symbol.

    Returns:
        The result of the operation.

    Raises:
        DivisionByZero: Division with a zero rhs.
        ModuloByZero: Modulo with a zero rhs.
        UnsupportedOperation: Unknown operation.
    """
    op = Operation.from_symbol(operation)
    result = _DISPATCH[op](float(lhs), float(rhs))
    logger.debug("calculate %r %s %r -> %r", lhs, op.symbol, rhs, result)
    return result
