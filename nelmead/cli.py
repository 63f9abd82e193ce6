"""Command line: optimise an expression and write the iteration log to a file."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

from .point import Point
from .solver import LogEntry, NelderMeadSolver

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_USAGE = "usage: nelmead EPOCH EPS FUNCTION LOG_FILE START_POINT"


def split(text: str, delimiter: str = " ") -> list[str]:
    """Split ``text`` on ``delimiter``; an empty text gives no parts."""
    if not text:
        return []
    return text.split(delimiter)


def format_point(point: Iterable[float]) -> str:
    """Coordinates in parentheses, six decimals each."""
    return "(" + ", ".join(f"{value:f}" for value in point) + ")"


def format_log(log: LogEntry) -> str:
    """One line of the log file."""
    points = "".join(format_point(point) for point in log.points)
    return f"{log.func_val:f} {log.measure:f} {{{points}}}\n"


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def main(argv: Sequence[str] | None = None) -> int:
    """Arguments: epoch count, minimal simplex measure, function, log path, start point."""
    args = list(sys.argv[1:] if argv is None else argv)
    for number, arg in enumerate(args, start=1):
        print(f"Аргумент {number}: {arg}")
    if len(args) < 5:
        print(_USAGE, file=sys.stderr)
        return 2

    epoch = _leading_int(args[0]) % 2**32
    eps = _leading_float(args[1])
    function = args[2]
    solver = NelderMeadSolver(eps, epoch)
    with open(args[3], "w", encoding="utf-8") as out_file:
        try:
            start = Point(_leading_float(coord) for coord in split(args[4]))
            solver.optimize(function, start)
        except Exception:
            return 1
        out_file.writelines(format_log(log) for log in solver.get_logs(function))
    return 0


if __name__ == "__main__":
    sys.exit(main())