"""A compiled arithmetic expression over variables x1, x2, ..."""

from __future__ import annotations

from collections.abc import Sequence

from .algebra import ExpressionError
from .postfix import evaluate_postfix, to_postfix


class Function:
    """An expression parsed once and evaluated at any number of points."""

    def __init__(self, expression: str) -> None:
        if not expression:
            raise ExpressionError("Empty expression")
        self.expression = expression
        self.postfix = tuple(to_postfix(expression))

    def calculate(self, point: Sequence[float]) -> float:
        """Value of the expression at ``point``."""
        return evaluate_postfix(self.postfix, point)

    def __call__(self, point: Sequence[float]) -> float:
        return self.calculate(point)

    def __repr__(self) -> str:
        return f"Function({self.expression!r})"