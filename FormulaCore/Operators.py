# Operators.py
"""Fixed table of the functions a formula may call."""

from collections import namedtuple
from enum import Enum
from types import MappingProxyType
import operator


class OperatorKind(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


Operator = namedtuple("Operator", ["keyword", "kind", "arity", "apply"])


# keyword -> Operator. Keywords are case sensitive and have no aliases.
OPERATORS = MappingProxyType({
    "add":      Operator("add",      OperatorKind.ADD,      2, operator.add),
    "subtract": Operator("subtract", OperatorKind.SUBTRACT, 2, operator.sub),
    "multiply": Operator("multiply", OperatorKind.MULTIPLY, 2, operator.mul),
    "divide":   Operator("divide",   OperatorKind.DIVIDE,   2, operator.truediv),
})

BY_KIND = MappingProxyType({op.kind: op for op in OPERATORS.values()})


def lookup(keyword):
    """Return the Operator for keyword, or None if the function is unknown."""
    return OPERATORS.get(keyword)
