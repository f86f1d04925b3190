# MathEngine.py
"""
Core calculation engine for the formula calculator.

Pipeline
--------
1) Builder: turns a formula like "multiply(add(2, 3), divide(10, 2))" into a
   tree of Number / BinOp nodes (recursive descent over whole substrings).
2) Resolver: computes the float value of the tree.
3) Formatter: rounds the value with Decimal and renders it as a plain string.

evaluate() is the public entry point; it never raises and reports every
failure as a message string.
"""

import re
import math
import logging
from decimal import Decimal, localcontext, ROUND_HALF_EVEN

from . import StringParser
from . import error as E
from .Operators import OperatorKind, BY_KIND, lookup

logger = logging.getLogger(__name__)

# Divisors with a smaller magnitude count as zero (smallest positive double)
EPSILON = 5e-324

# Deepest nesting build() accepts unless told otherwise
MAX_NESTING_DEPTH = 100

# One rounding policy for every result
ROUNDING = ROUND_HALF_EVEN

# Decimal literal: optional sign, digits with optional fraction, optional exponent
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

PARSE_ERROR_PREFIX = "Error while parsing formula: "
DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero"
UNEXPECTED_ERROR_PREFIX = "Unexpected error: "


# -----------------------------
# Tree node types
# -----------------------------

class Number:
    """Leaf node for a numeric literal."""
    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = float(value)

    @property
    def value(self):
        return self._value

    @property
    def depth(self):
        return 1

    def resolve(self):
        return self._value

    def __eq__(self, other):
        return isinstance(other, Number) and other._value == self._value

    def __hash__(self):
        return hash(("Number", self._value))

    def __repr__(self):
        return f"Number({self._value!r})"


class BinOp:
    """Node for a two-parameter function call: kind(left, right)."""
    __slots__ = ("_kind", "_left", "_right")

    def __init__(self, kind, left, right):
        self._kind = kind
        self._left = left
        self._right = right

    @property
    def kind(self):
        return self._kind

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    @property
    def children(self):
        return (self._left, self._right)

    @property
    def depth(self):
        return 1 + max(self._left.depth, self._right.depth)

    def resolve(self):
        """Resolve both parameters and apply the operator.

        divide checks its divisor before touching the dividend, so a zero
        divisor is reported even when the dividend would fail as well.
        All other operators resolve left before right.
        """
        apply = BY_KIND[self._kind].apply

        if self._kind is OperatorKind.DIVIDE:
            divisor = self._right.resolve()
            if abs(divisor) < EPSILON:
                raise E.DivisionByZeroError()
            return apply(self._left.resolve(), divisor)

        left_value = self._left.resolve()
        right_value = self._right.resolve()
        return apply(left_value, right_value)

    def __eq__(self, other):
        return (isinstance(other, BinOp) and other._kind is self._kind
                and other._left == self._left and other._right == self._right)

    def __hash__(self):
        return hash((self._kind, self._left, self._right))

    def __repr__(self):
        return f"BinOp({self._kind.value!r}, left={self._left}, right={self._right})"


# -----------------------------
# Builder (recursive descent)
# -----------------------------

def parse_number(text):
    """Return the float for a complete decimal literal, or None if text is not one."""
    if NUMBER_PATTERN.fullmatch(text):
        return float(text)
    return None


def _looks_numeric(text):
    return text[0].isdigit() or text[0] in "+-."


def build(text, max_depth=MAX_NESTING_DEPTH):
    """Parse a formula into a tree.

    max_depth limits how deeply calls may be nested (0 or less disables the limit).
    """
    return _build(text, 1, max_depth)


def _build(text, depth, max_depth):
    if text is None or not text.strip():
        raise E.EmptyInputError()

    if max_depth > 0 and depth > max_depth:
        raise E.NestingTooDeepError(max_depth)

    text = text.strip()

    # Literals first, function calls second
    value = parse_number(text)
    if value is not None:
        return Number(value)

    if '(' not in text and _looks_numeric(text):
        raise E.InvalidNumberError(text)

    keyword = StringParser.extract_keyword(text)
    entry = lookup(keyword)
    if entry is None:
        raise E.UnknownFunctionError(keyword)

    content = StringParser.extract_parameter_content(text)
    parameters = StringParser.split_parameters(content)
    StringParser.validate_parameter_count(keyword, entry.arity, len(parameters))

    children = [_build(parameter, depth + 1, max_depth) for parameter in parameters]
    return BinOp(entry.kind, *children)


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(result, decimal_places):
    """Round result to decimal_places and render it without trailing zeros.

    3.3333 -> "3.33" (2 places), 4.0 -> "4", -0.0 -> "0".
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must not be negative, got {decimal_places}")

    if not math.isfinite(result):
        raise E.CalculationError("Number too large (arithmetic overflow)", code="3026")

    # repr gives the shortest string that round-trips, so no float artifacts
    number = Decimal(repr(result))

    with localcontext() as ctx:
        # Enough digits for the integer part plus the requested places
        ctx.prec = max(ctx.prec, number.adjusted() + decimal_places + 2)
        rounded = number.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUNDING)
        if rounded.is_zero():
            return "0"
        return format(rounded.normalize(), 'f')


# -----------------------------
# Public entry point
# -----------------------------

def evaluate(formula, decimal_places=2, max_depth=MAX_NESTING_DEPTH):
    """Main API: build -> resolve -> format. Always returns a string.

    Pure: no settings, files or environment are consulted.
    """
    try:
        tree = build(formula, max_depth)
        logger.debug("Built tree for %r: %r", formula, tree)

        return cleanup(tree.resolve(), decimal_places)

    except E.FormulaParseError as e:
        e.equation = formula
        logger.debug("%s in %r: %s", E.describe(e.code), formula, e.message)
        return PARSE_ERROR_PREFIX + e.message

    except E.DivisionByZeroError as e:
        e.equation = formula
        logger.debug("%s in %r", E.describe(e.code), formula)
        return DIVISION_BY_ZERO_MESSAGE

    # Convert anything else into the catch-all message
    except Exception as e:
        if isinstance(e, E.MathError):
            e.equation = formula
            logger.warning("%s in %r", E.describe(e.code), formula)
        logger.warning("Unexpected error while evaluating %r: %s", formula, e, exc_info=True)
        return UNEXPECTED_ERROR_PREFIX + str(e)
