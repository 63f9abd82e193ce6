"""The operations an expression may use and how they are applied."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum


class ExpressionError(ValueError):
    """Raised for malformed expressions and invalid arithmetic."""


class OpName(IntEnum):
    PAREN = -1
    PLUS = 0
    MINUS = 1
    MULT = 3
    DIVIDE = 4
    POWER = 5
    SIN = 6
    COS = 7
    TAN = 8
    CTG = 9
    LN = 10
    LOG2 = 11
    LOG = 12
    SQRT = 13
    ABS = 14


class OpKind(IntEnum):
    NONE = 0
    UNARY = 1
    BINARY = 2


@dataclass(frozen=True)
class Operation:
    name: OpName
    priority: int
    kind: OpKind


_OPERATIONS: dict[str, Operation] = {
    "()": Operation(OpName.PAREN, 0, OpKind.NONE),
    ")": Operation(OpName.PAREN, 0, OpKind.NONE),
    "+": Operation(OpName.PLUS, 1, OpKind.BINARY),
    "-": Operation(OpName.MINUS, 2, OpKind.BINARY),
    "*": Operation(OpName.MULT, 3, OpKind.BINARY),
    "/": Operation(OpName.DIVIDE, 3, OpKind.BINARY),
    "^": Operation(OpName.POWER, 4, OpKind.BINARY),
    "sin": Operation(OpName.SIN, 5, OpKind.UNARY),
    "cos": Operation(OpName.COS, 5, OpKind.UNARY),
    "tan": Operation(OpName.TAN, 5, OpKind.UNARY),
    "ctg": Operation(OpName.CTG, 5, OpKind.UNARY),
    "ln": Operation(OpName.LN, 5, OpKind.UNARY),
    "log2": Operation(OpName.LOG2, 5, OpKind.UNARY),
    "log": Operation(OpName.LOG, 5, OpKind.UNARY),
    "sqrt": Operation(OpName.SQRT, 5, OpKind.UNARY),
    "abs": Operation(OpName.ABS, 5, OpKind.UNARY),
}

_NO_PRIORITY = -2
_OPERATOR_CHARS = frozenset("+-*/^")


def get_operation(token: str) -> Operation | None:
    """The operation a token names, or None."""
    return _OPERATIONS.get(token)


def _priority(token: str) -> int:
    operation = _OPERATIONS.get(token)
    return _NO_PRIORITY if operation is None else operation.priority


def outranks(first: str, second: str) -> bool:
    """True when ``first`` binds at least as tightly as ``second``."""
    return _priority(first) >= _priority(second)


def is_operation(token: str) -> bool:
    """True for tokens that name an operation (parentheses excluded)."""
    return token in _OPERATIONS and token not in ("(", ")")


def is_operator_char(symbol: str) -> bool:
    """True for the single-character arithmetic operators."""
    return symbol in _OPERATOR_CHARS


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0.0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def _nan_outside_domain(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return math.nan

    return wrapped


def _cotangent(value: float) -> float:
    # "tan" is evaluated as the arc tangent, and "ctg" as its reciprocal.
    angle = math.atan(value)
    if angle == 0:
        raise ExpressionError("Attempted to divide by zero")
    return 1 / angle


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        if value < 0:
            raise ExpressionError("Logarithm of a value less than zero")
        if value == 0:
            return -math.inf
        return func(value)

    return wrapped


def _sqrt(value: float) -> float:
    return math.nan if value < 0 else math.sqrt(value)


_UNARY: dict[OpName, Callable[[float], float]] = {
    OpName.SIN: _nan_outside_domain(math.sin),
    OpName.COS: _nan_outside_domain(math.cos),
    OpName.TAN: math.atan,
    OpName.CTG: _cotangent,
    OpName.LN: _logarithm(math.log),
    OpName.LOG2: _logarithm(math.log2),
    OpName.LOG: _logarithm(math.log10),
    OpName.SQRT: _sqrt,
    OpName.ABS: abs,
}


def _operands(values: list[float], count: int, token: str) -> list[float]:
    if len(values) != count:
        raise ExpressionError(f"Operation {token!r} takes {count} operand(s), got {len(values)}")
    return values


def calc(token: str, args: Sequence[float]) -> float:
    """Apply the operation ``token`` to ``args`` given in written order."""
    operation = _OPERATIONS.get(token)
    if operation is None:
        raise ExpressionError(f"Invalid operation {token!r}")
    values = [float(arg) for arg in args]
    name = operation.name

    if name is OpName.MINUS:
        if len(values) == 1:
            return -values[0]
        if len(values) == 2:
            return values[0] - values[1]
        raise ExpressionError("Incorrect expression")

    if operation.kind is OpKind.BINARY:
        left, right = _operands(values, 2, token)
        if name is OpName.PLUS:
            return left + right
        if name is OpName.MULT:
            return left * right
        if name is OpName.DIVIDE:
            if right == 0:
                raise ExpressionError("Attempted to divide by zero")
            return left / right
        return _power(left, right)

    if operation.kind is OpKind.UNARY:
        (value,) = _operands(values, 1, token)
        return _UNARY[name](value)

    raise ExpressionError(f"Invalid operation {token!r}")