"""Tests for evaluator.py - Binary arithmetic."""

import math
import pytest

from session_calculator.errors import (
    CalculatorError,
    DivisionByZero,
    EvaluationError,
    ModuloByZero,
    UnsupportedOperation,
)
from session_calculator.evaluator import (
    Operation,
    add,
    calculate,
    divide,
    modulo,
    multiply,
    subtract,
)


class TestOperation:
    """Tests for Operation enum."""

    def test_symbols(self):
        """Test each operation is keyed by its symbol."""
        assert [op.symbol for op in Operation] == ["+", "-", "*", "/", "%"]

    def test_from_symbol(self):
        """Test resolving symbols."""
        assert Operation.from_symbol("/") is Operation.DIVIDE
        assert Operation.from_symbol(Operation.MODULO) is Operation.MODULO

    def test_from_symbol_unknown(self):
        """Test unknown symbols are rejected."""
        with pytest.raises(UnsupportedOperation):
            Operation.from_symbol("^")


class TestBasicOperations:
    """Tests for add, subtract, multiply."""

    def test_add(self):
        assert add(10.0, 5.0) == 15.0

    def test_subtract(self):
        assert subtract(10.0, 15.0) == -5.0

    def test_multiply(self):
        assert multiply(15.0, 2.0) == 30.0

    def test_overflow_is_not_an_error(self):
        """Test overflow yields inf instead of raising."""
        assert multiply(1e308, 10.0) == math.inf


class TestDivide:
    """Tests for divide."""

    def test_divide(self):
        """Test division matches float division."""
        for a, b in [(1.0, 3.0), (-7.5, 2.5), (1e-300, 1e10), (0.0, -4.0)]:
            assert divide(a, b) == a / b

    def test_divide_by_zero(self):
        """Test zero divisor raises."""
        with pytest.raises(DivisionByZero) as exc_info:
            divide(8.0, 0.0)
        assert str(exc_info.value) == "Division by zero is undefined."

    def test_divide_by_negative_zero(self):
        """Test -0.0 counts as zero."""
        with pytest.raises(DivisionByZero):
            divide(8.0, -0.0)

    def test_divide_by_tiny_value(self):
        """Test there is no epsilon tolerance."""
        assert divide(1.0, 1e-300) == 1.0 / 1e-300


class TestModulo:
    """Tests for modulo."""

    def test_modulo_matches_fmod(self):
        """Test modulo is the IEEE remainder with the sign of lhs."""
        for a, b in [(7.0, 3.0), (-7.0, 2.0), (7.0, -2.0), (5.5, 1.5), (0.1, 0.03)]:
            assert modulo(a, b) == math.fmod(a, b)

    def test_modulo_sign_follows_lhs(self):
        assert modulo(-7.0, 2.0) == -1.0
        assert modulo(7.0, -2.0) == 1.0

    def test_modulo_by_zero(self):
        """Test zero divisor raises."""
        with pytest.raises(ModuloByZero) as exc_info:
            modulo(5.0, 0.0)
        assert str(exc_info.value) == "Modulo by zero is undefined."

    def test_modulo_infinite_lhs(self):
        """Test an infinite dividend gives nan."""
        assert math.isnan(modulo(math.inf, 3.0))


class TestCalculate:
    """Tests for calculate dispatch."""

    def test_calculate_with_enum(self):
        assert calculate(10.0, 5.0, Operation.ADD) == 15.0
        assert calculate(15.0, 2.0, Operation.MULTIPLY) == 30.0

    def test_calculate_with_symbol(self):
        assert calculate(10.0, 4.0, "-") == 6.0
        assert calculate(10.0, 4.0, "/") == 2.5
        assert calculate(10.0, 4.0, "%") == 2.0

    def test_calculate_unsupported(self):
        """Test unsupported selector raises."""
        with pytest.raises(UnsupportedOperation) as exc_info:
            calculate(1.0, 2.0, "x")
        assert str(exc_info.value) == "Unsupported operation."

    def test_calculate_zero_divisor_always_fails(self):
        """Test divide and modulo by zero never return a value."""
        for lhs in [0.0, 1.0, -3.5, 1e300]:
            with pytest.raises(DivisionByZero):
                calculate(lhs, 0.0, "/")
            with pytest.raises(ModuloByZero):
                calculate(lhs, 0.0, "%")

    def test_error_hierarchy(self):
        """Test arithmetic errors share a base class."""
        assert issubclass(DivisionByZero, EvaluationError)
        assert issubclass(ModuloByZero, EvaluationError)
        assert issubclass(UnsupportedOperation, EvaluationError)
        assert issubclass(EvaluationError, CalculatorError)
        assert issubclass(DivisionByZero, ZeroDivisionError)
