"""
Formula calculator.

Evaluates prefix function formulas such as "multiply(add(2, 3), divide(10, 2))"
and returns the rounded result as a string.
"""

from .MathEngine import evaluate, build, cleanup, Number, BinOp
from .Operators import OperatorKind, OPERATORS
from .error import MathError, FormulaParseError, CalculationError, DivisionByZeroError

__all__ = [
    'evaluate', 'build', 'cleanup', 'Number', 'BinOp',
    'OperatorKind', 'OPERATORS',
    'MathError', 'FormulaParseError', 'CalculationError', 'DivisionByZeroError',
]
