"""Nelder-Mead minimisation of expressions over variables x1, x2, ..."""

from __future__ import annotations

import random
from bisect import insort
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .algebra import ExpressionError
from .function import Function
from .point import Point, measure

_Vertex = tuple[float, Point]


def _value(vertex: _Vertex) -> float:
    return vertex[0]


@dataclass
class LogEntry:
    """State of the simplex at the start of one iteration."""

    points: list[Point]
    measure: float
    func_val: float


class NelderMeadSolver:
    """Minimises a function with restarts of the simplex every few iterations."""

    EXPANSION = 2.0
    SHRINK = 0.5
    REFLECTION = 1.0
    RESTART_PERIOD = 25

    def __init__(
        self,
        eps: float = 10e-5,
        epoch: int = 100,
        rng: random.Random | None = None,
    ) -> None:
        self.eps = eps
        self.epoch = epoch
        self.rng = rng
        self._logs: dict[str, list[LogEntry]] = {}

    def optimize(self, function: str, start_point: Iterable[float]) -> float:
        """Minimum of ``function`` found starting from ``start_point``."""
        rng = self.rng if self.rng is not None else random.Random()
        dim = self.count_dim(function)
        func = Function(function)
        start = Point(start_point)
        if dim == 0:
            raise ValueError("the function has no variables to optimise")
        if len(start) < dim:
            raise ValueError(
                f"start point has {len(start)} coordinates, the function needs {dim}"
            )

        history: list[LogEntry] = []
        current_measure = 100.0
        simplex = self._generate_simplex(dim, start, func, rng)
        for _ in range(max(1, self.epoch // self.RESTART_PERIOD)):
            counter = 0
            while counter < self.RESTART_PERIOD and current_measure > self.eps:
                counter += 1
                current_measure = measure(point for _, point in simplex)
                f_l, best = simplex[0]
                history.append(LogEntry([Point(best)], current_measure, f_l))
                self._step(func, simplex)
            simplex = self._generate_simplex(dim, simplex[0][1], func, rng)

        self._logs[function] = history
        return simplex[0][0]

    def count_dim(self, function: str) -> int:
        """Number of variables; they must be numbered x1 to xN without gaps."""
        indices: set[int] = set()
        chars: Iterator[str] = iter(function)
        for char in chars:
            if char != "x":
                continue
            digits = []
            # The first character after the digits is consumed with them.
            for following in chars:
                if not following.isdigit() or not following.isascii():
                    break
                digits.append(following)
            if not digits:
                raise ExpressionError("invalid variable name")
            indices.add(int("".join(digits)))

        if not indices:
            return 0
        highest = max(indices)
        if highest != len(indices):
            raise ExpressionError("Wrong variable numerization!")
        return highest

    def get_logs(self, function: str) -> list[LogEntry]:
        """Iteration log of the last optimisation of ``function``."""
        try:
            return list(self._logs[function])
        except KeyError:
            raise KeyError(f"function {function!r} has not been optimised") from None

    def _step(self, func: Function, simplex: list[_Vertex]) -> None:
        f_h, worst = simplex[-1]
        center = self._center(simplex)
        reflected = (1.0 + self.REFLECTION) * center - self.REFLECTION * worst
        f_r = func(reflected)
        f_l = simplex[0][0]
        f_g = simplex[1][0]

        if f_r < f_l:
            expanded = (1.0 - self.EXPANSION) * center + self.EXPANSION * reflected
            f_e = func(expanded)
            if f_e < f_r:
                insort(simplex, (f_e, expanded), key=_value)
            else:
                insort(simplex, (f_r, reflected), key=_value)
            simplex.pop()
        elif f_l <= f_r < f_g:
            insort(simplex, (f_r, reflected), key=_value)
            simplex.pop()
        elif f_g <= f_r < f_h:
            insort(simplex, (f_r, reflected), key=_value)
            simplex.pop()
            self._local_shrink(func, simplex, center)
        elif f_h <= f_r:
            self._local_shrink(func, simplex, center)

    @staticmethod
    def _center(simplex: list[_Vertex]) -> Point:
        center = Point(len(simplex) - 1)
        for _, point in simplex[:-1]:
            center = center + point
        return center * (1.0 / (len(simplex) - 1))

    @staticmethod
    def _generate_simplex(
        dim: int, start: Point, func: Function, rng: random.Random
    ) -> list[_Vertex]:
        simplex: list[_Vertex] = []
        insort(simplex, (func(start), Point(start)), key=_value)
        for axis in range(dim):
            point = Point(start)
            point[axis] = point[axis] + (-1.0 if rng.randrange(2) == 0 else 1.0)
            insort(simplex, (func(point), point), key=_value)
        return simplex

    def _local_shrink(self, func: Function, simplex: list[_Vertex], center: Point) -> None:
        f_h, worst = simplex[-1]
        shrunk = self.SHRINK * worst + (1 - self.SHRINK) * center
        f_s = func(shrunk)
        if f_s < f_h:
            simplex.pop()
            insort(simplex, (f_s, shrunk), key=_value)
        else:
            self._global_shrink(func, simplex)

    @staticmethod
    def _global_shrink(func: Function, simplex: list[_Vertex]) -> None:
        best = simplex[0][1]
        shrunk = [best + 0.5 * (point - best) for _, point in simplex]
        simplex[:] = sorted(((func(point), point) for point in shrunk), key=_value)