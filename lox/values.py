"""Runtime value helpers for Lox.

Lox values map directly onto Python objects:

    nil     -> None
    boolean -> bool
    number  -> float (there is no integer type)
    string  -> str

Anything else is an opaque extension value (callables, instances) that
the core does not create itself. The helpers below implement the
language's truthiness, equality and printing rules over that closed set,
plus the operand checks shared by the arithmetic and comparison
operators.
"""

from __future__ import annotations

import math
from typing import Any

from .errors import LoxRuntimeError
from .tokens import Token


def type_name(value: Any) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def is_number(value: Any) -> bool:
    # bool is not a float subclass, so true/false never pass as numbers
    return isinstance(value, float)


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    if a is None:
        return b is None
    # Values of different kinds are never equal (true != 1)
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        # NaN equals itself; 0 and -0 differ
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def stringify(value: Any) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        text = str(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return str(value)


def check_number_operand(operator: Token, operand: Any):
    if is_number(operand):
        return
    raise LoxRuntimeError(operator, 'Operand must be a number.')


def check_number_operands(operator: Token, left: Any, right: Any):
    if is_number(left) and is_number(right):
        return
    raise LoxRuntimeError(operator, 'Operands must be numbers.')


def divide(left: float, right: float) -> float:
    """IEEE division: x/0 is +-inf and 0/0 is nan instead of a Python error."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
