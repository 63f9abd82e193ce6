import math

import pytest

from nelmead.algebra import (
    ExpressionError,
    OpKind,
    OpName,
    calc,
    get_operation,
    is_operation,
    is_operator_char,
    outranks,
)


def test_get_operation_plus():
    op = get_operation("+")
    assert op.name is OpName.PLUS
    assert op.kind is OpKind.BINARY
    assert op.priority == 1


def test_get_operation_function_is_unary():
    assert get_operation("sqrt").kind is OpKind.UNARY


def test_get_operation_unknown():
    assert get_operation("(") is None
    assert get_operation("x1") is None


def test_outranks():
    assert outranks("*", "+") is True
    assert outranks("/", "*") is True
    assert outranks("+", "-") is False
    assert outranks("(", "+") is False


@pytest.mark.parametrize("token", ["+", "-", "*", "/", "^", "sin", "log2", "abs", "()"])
def test_is_operation_true(token):
    assert is_operation(token) is True


@pytest.mark.parametrize("token", ["(", ")", "x1", "2.5", "exp"])
def test_is_operation_false(token):
    assert is_operation(token) is False


def test_is_operator_char():
    assert all(is_operator_char(c) for c in "+-*/^")
    assert not any(is_operator_char(c) for c in "()x1 .s")


def test_binary_arithmetic():
    assert calc("+", (2.0, 3.5)) == 2.0 + 3.5
    assert calc("-", (5.0, 2.0)) == 5.0 - 2.0
    assert calc("*", (4.0, 2.5)) == 4.0 * 2.5
    assert calc("/", (1.0, 4.0)) == 1.0 / 4.0
    assert calc("^", (2.0, 10.0)) == 2.0**10


def test_unary_minus():
    assert calc("-", (5.0,)) == -5.0


def test_minus_wrong_arity():
    with pytest.raises(ExpressionError):
        calc("-", (1.0, 2.0, 3.0))


def test_divide_by_zero():
    with pytest.raises(ExpressionError):
        calc("/", (1.0, 0.0))


def test_tan_is_arc_tangent():
    assert calc("tan", (1.0,)) == math.atan(1.0)


def test_ctg_reciprocal_and_zero():
    assert calc("ctg", (2.0,)) == 1 / math.atan(2.0)
    with pytest.raises(ExpressionError):
        calc("ctg", (0.0,))


@pytest.mark.parametrize("token", ["ln", "log2", "log"])
def test_logarithms_reject_negative(token):
    with pytest.raises(ExpressionError):
        calc(token, (-1.0,))


@pytest.mark.parametrize("token", ["ln", "log2", "log"])
def test_logarithms_of_zero(token):
    assert calc(token, (0.0,)) == -math.inf


def test_logarithm_values():
    assert calc("ln", (math.e,)) == math.log(math.e)
    assert calc("log2", (8.0,)) == math.log2(8.0)
    assert calc("log", (1000.0,)) == math.log10(1000.0)


def test_sqrt_and_abs():
    assert calc("sqrt", (16.0,)) == math.sqrt(16.0)
    assert math.isnan(calc("sqrt", (-1.0,)))
    assert calc("abs", (-3.5,)) == 3.5


def test_trig_of_infinity_is_nan():
    assert math.isnan(calc("sin", (math.inf,)))
    assert math.isnan(calc("cos", (-math.inf,)))


def test_power_edge_cases():
    assert math.isnan(calc("^", (-8.0, 1 / 3)))
    assert calc("^", (0.0, -1.0)) == math.inf
    assert calc("^", (1e200, 2.0)) == math.inf
    assert calc("^", (-1e200, 3.0)) == -math.inf


def test_unknown_operation():
    with pytest.raises(ExpressionError):
        calc("exp", (1.0,))


def test_paren_is_not_applicable():
    with pytest.raises(ExpressionError):
        calc("()", (1.0,))


def test_wrong_arity_for_binary_and_unary():
    with pytest.raises(ExpressionError):
        calc("+", (1.0,))
    with pytest.raises(ExpressionError):
        calc("sin", (1.0, 2.0))