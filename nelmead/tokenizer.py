"""Splitting an expression into tokens."""

from __future__ import annotations

from collections.abc import Iterable

from .algebra import ExpressionError, is_operator_char


def _is_separator(symbol: str) -> bool:
    return symbol in " ()" or is_operator_char(symbol)


def tokenize(expression: str) -> list[str]:
    """Split on spaces, parentheses and operators; spaces are dropped."""
    tokens: list[str] = []
    current: list[str] = []
    for symbol in expression:
        if _is_separator(symbol):
            if current:
                tokens.append("".join(current))
                current.clear()
            if symbol != " ":
                tokens.append(symbol)
        else:
            current.append(symbol)
    if current:
        tokens.append("".join(current))
    check_parentheses(tokens)
    return tokens


def check_parentheses(tokens: Iterable[str]) -> None:
    """Raise ExpressionError unless the parentheses are balanced."""
    depth = 0
    for token in tokens:
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
        if depth < 0:
            raise ExpressionError("Incorrect parentheses count")
    if depth > 0:
        raise ExpressionError("Incorrect parentheses count")