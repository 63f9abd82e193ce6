import random

import pytest

from nelmead.algebra import ExpressionError
from nelmead.point import Point
from nelmead.solver import LogEntry, NelderMeadSolver


def make_solver(eps=1e-6, epoch=200, seed=0):
    return NelderMeadSolver(eps, epoch, random.Random(seed))


@pytest.mark.parametrize(
    "function, expected",
    [
        ("x1+x2", 2),
        ("x1*x1", 1),
        ("3+4", 0),
        ("x2^2 + x1 + x3", 3),
    ],
)
def test_count_dim(function, expected):
    assert make_solver().count_dim(function) == expected


@pytest.mark.parametrize("function", ["x + 1", "x1+x3", "x0"])
def test_count_dim_rejects_bad_variables(function):
    with pytest.raises(ExpressionError):
        make_solver().count_dim(function)


def test_defaults():
    solver = NelderMeadSolver()
    assert solver.eps == pytest.approx(10e-5)
    assert solver.epoch == 100


def test_optimize_finds_minimum_of_paraboloid():
    solver = make_solver()
    result = solver.optimize("x1^2+x2^2", Point([1.0, 1.0]))
    assert result < 1e-3
    assert result >= 0.0


def test_best_value_never_increases():
    solver = make_solver()
    result = solver.optimize("x1^2+x2^2", [1.0, 1.0])
    values = [entry.func_val for entry in solver.get_logs("x1^2+x2^2")]
    assert values
    assert all(later <= earlier for earlier, later in zip(values, values[1:]))
    assert result <= values[-1]


def test_first_log_describes_start_simplex():
    solver = make_solver()
    solver.optimize("x1^2+x2^2", [1.0, 1.0])
    first = solver.get_logs("x1^2+x2^2")[0]
    assert first.measure == pytest.approx(1.0)
    assert first.func_val <= 2.0
    assert len(first.points) == 1


def test_log_count_bounded_by_epoch():
    solver = make_solver(eps=0.0, epoch=50)
    solver.optimize("x1^2", [3.0])
    assert 0 < len(solver.get_logs("x1^2")) <= 50


def test_zero_epoch_runs_one_round():
    solver = make_solver(eps=0.0, epoch=0)
    solver.optimize("x1^2", [3.0])
    assert len(solver.get_logs("x1^2")) == NelderMeadSolver.RESTART_PERIOD


def test_large_eps_stops_after_one_iteration():
    solver = make_solver(eps=10.0, epoch=100)
    solver.optimize("x1^2+x2^2", [1.0, 1.0])
    assert len(solver.get_logs("x1^2+x2^2")) == 1


def test_same_seed_gives_same_run():
    first = make_solver(seed=7)
    second = make_solver(seed=7)
    assert first.optimize("x1^2+x2^2", [2.0, -2.0]) == second.optimize("x1^2+x2^2", [2.0, -2.0])
    assert first.get_logs("x1^2+x2^2") == second.get_logs("x1^2+x2^2")


def test_logs_are_replaced_by_new_run():
    solver = make_solver(eps=10.0)
    solver.optimize("x1^2", [4.0])
    solver.optimize("x1^2", [2.0])
    logs = solver.get_logs("x1^2")
    assert len(logs) == 1
    assert logs[0].func_val <= 4.0


def test_get_logs_returns_copy():
    solver = make_solver()
    solver.optimize("x1^2", [1.0])
    logs = solver.get_logs("x1^2")
    count = len(logs)
    logs.clear()
    assert len(solver.get_logs("x1^2")) == count


def test_get_logs_unknown_function():
    with pytest.raises(KeyError):
        make_solver().get_logs("x1")


def test_optimize_without_variables():
    with pytest.raises(ValueError):
        make_solver().optimize("5", [1.0])


def test_optimize_short_start_point():
    with pytest.raises(ValueError):
        make_solver().optimize("x1+x2", [1.0])


def test_optimize_bad_expression():
    with pytest.raises(ExpressionError):
        make_solver().optimize("x1+x3", [1.0, 1.0, 1.0])


def test_log_entry_fields():
    entry = LogEntry([Point([1.0])], 0.5, 2.0)
    assert entry.points == [Point([1.0])]
    assert entry.measure == 0.5
    assert entry.func_val == 2.0