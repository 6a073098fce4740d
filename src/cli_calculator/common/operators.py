"""Supported arithmetic operators."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Literal


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# The four accepted operator symbols
Operator = Literal["+", "-", "*", "/"]

# Mapping of operator symbols to the function applying them
OPERATORS: dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
