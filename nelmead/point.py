"""Points in n-dimensional space and measures of simplices built from them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real


class Point:
    """A mutable vector of floating-point coordinates."""

    __slots__ = ("_coords",)

    def __init__(self, coords: int | Iterable[float]) -> None:
        if isinstance(coords, int):
            if coords < 0:
                raise ValueError(f"dimension must be non-negative, got {coords}")
            self._coords = [0.0] * coords
        else:
            self._coords = [float(value) for value in coords]

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, index):
        return self._coords[index]

    def __setitem__(self, index, value) -> None:
        self._coords[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None  # mutable

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        if len(self) != len(other):
            return Point(self._coords)
        return Point(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        if len(self) != len(other):
            return Point(self._coords)
        return Point(a - b for a, b in zip(self._coords, other._coords))

    def __mul__(self, coef: float) -> Point:
        if not isinstance(coef, Real):
            return NotImplemented
        return Point(value * coef for value in self._coords)

    def __rmul__(self, coef: float) -> Point:
        return self.__mul__(coef)

    def __repr__(self) -> str:
        return f"Point({self._coords!r})"


def distance(left: Point, right: Point) -> float:
    """Euclidean distance; 0.0 when the dimensions differ."""
    if len(left) != len(right):
        return 0.0
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(left, right)))


def check_dimensions(simplex: Sequence[Point]) -> bool:
    """True when every point has one coordinate fewer than the simplex has points."""
    return all(len(point) + 1 == len(simplex) for point in simplex)


def factorial(n: int) -> float:
    """n! as a float."""
    return math.prod(range(1, n + 1), start=1.0)


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant of a square matrix by cofactor expansion along the first row."""
    n = len(matrix)
    if n == 0:
        return 0.0
    if n == 1:
        return float(matrix[0][0])
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]

    det = 0.0
    for col, pivot in enumerate(matrix[0][:n]):
        minor = [[value for j, value in enumerate(row[:n]) if j != col] for row in matrix[1:]]
        det += pivot * (-1) ** col * determinant(minor)
    return det


def long_measure(simplex: Sequence[Point]) -> float:
    """Volume of a simplex, or -1.0 when its points do not fit its size."""
    if not simplex:
        raise ValueError("simplex has no points")
    if not check_dimensions(simplex):
        return -1.0
    base = simplex[0]
    matrix = [list(point - base) for point in simplex[1:]]
    return abs(determinant(matrix)) / factorial(len(matrix))


def measure(points: Iterable[Point]) -> float:
    """Mean distance from the first point to the others."""
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("a measure needs at least two points")
    start = pts[0]
    return sum(distance(start, point) for point in pts) / (len(pts) - 1)