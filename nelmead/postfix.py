"""Conversion to postfix notation and evaluation of postfix token lists."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

from .algebra import (
    ExpressionError,
    OpKind,
    OpName,
    calc,
    get_operation,
    is_operation,
    outranks,
)
from .tokenizer import tokenize

_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_VARIABLE = re.compile(r"(-?)x([0-9]+)")
_LEADING_SPACE = " \t\n\v\f\r"
_OPERATOR_CODES = frozenset(ord(c) for c in "+-*/^")


def to_postfix(expression: str) -> list[str]:
    """Tokenize ``expression`` and reorder the tokens into postfix notation."""
    output: list[str] = []
    stack: list[str] = []
    for token in tokenize(expression):
        if token == "(":
            stack.append(token)
        elif token == ")":
            while stack[-1] != "(":
                output.append(stack.pop())
            stack.pop()
        elif is_operation(token):
            while stack and outranks(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        else:
            output.append(token)
    output.extend(reversed(stack))
    return output


def _parse_number(token: str) -> float:
    text = token.lstrip(_LEADING_SPACE)
    if _NUMBER.fullmatch(text) is None:
        raise ExpressionError(f"Invalid number {token}")
    value = float(text)
    lowered = text.lower()
    if math.isinf(value) and "inf" not in lowered:
        raise ExpressionError(f"Out of range: {token}")
    if value == 0.0 and "nan" not in lowered:
        mantissa = re.split("[eE]", text)[0]
        if any(c in "123456789" for c in mantissa):
            raise ExpressionError(f"Out of range: {token}")
    return value


def decode_operand(token: str, point: Sequence[float]) -> float:
    """Value of a numeric literal or of a variable ``xN`` / ``-xN`` at ``point``."""
    if not token:
        raise ExpressionError("Empty operand")
    if token[0] != "x" and token[min(1, len(token) - 1)] != "x":
        return _parse_number(token)
    match = _VARIABLE.fullmatch(token)
    if match is None:
        raise ExpressionError(f"Invalid argument {token}")
    index = int(match.group(2)) - 1
    if not 0 <= index < len(point):
        raise ExpressionError(f"Invalid index {token}")
    value = point[index]
    return -value if match.group(1) else value


def _is_operator_code(value: float) -> bool:
    # A left operand whose integer part is the code of an operator character
    # counts as a marker, which makes the following minus unary.
    return math.isfinite(value) and int(value) in _OPERATOR_CODES


def _pop(stack: list[float]) -> float:
    if not stack:
        raise ExpressionError("Incorrect expression")
    return stack.pop()


def evaluate_postfix(postfix: Iterable[str], point: Sequence[float]) -> float:
    """Evaluate postfix tokens at ``point``; the result is the top of the stack."""
    stack: list[float] = []
    for token in postfix:
        operation = get_operation(token) if is_operation(token) else None
        if operation is None:
            stack.append(decode_operand(token, point))
            continue
        if operation.kind is OpKind.BINARY:
            right = _pop(stack)
            if operation.name is OpName.MINUS and (not stack or _is_operator_code(stack[-1])):
                stack.append(calc(token, (right,)))
                continue
            left = _pop(stack)
            stack.append(calc(token, (left, right)))
        elif operation.kind is OpKind.UNARY:
            stack.append(calc(token, (_pop(stack),)))
        else:
            raise ExpressionError("Incorrect operation type")
    if not stack:
        raise ExpressionError("Incorrect expression")
    return stack[-1]