import math

import numpy as np
import pytest
import sympy as sp

from symbolic_calculus import (
    Expression, Variable, Constant, Sum, Difference, Polynomial, Logarithmic,
    Sine, Cosine, Tangent, set_config, DomainError, ExpressionDepthError
)

x = Variable("x")


def test_evaluate():
    assert Expression(Polynomial(x, 2.0)).evaluate(3.0) == 9.0


def test_strict_evaluation_rejects_non_finite_values():
    expr = Expression(Logarithmic.natural(x))
    assert math.isnan(expr.evaluate(-1.0))
    with pytest.raises(DomainError) as excinfo:
        expr.evaluate(-1.0, strict=True)
    assert math.isnan(excinfo.value.value)


def test_evaluate_many():
    values = Expression(Polynomial(x, 2.0)).evaluate_many([0.0, 1.0, 2.0])
    assert isinstance(values, np.ndarray)
    np.testing.assert_array_equal(values, [0.0, 1.0, 4.0])


def test_derivative_and_simplify_return_expressions():
    expr = Expression(Polynomial(x, 3.0))
    slope = expr.derivative()
    assert isinstance(slope, Expression)
    assert slope.evaluate(2.0) == 12.0

    simplified = Expression(Difference(Constant(0.0), Constant(0.0))).simplify(fixpoint=True)
    assert simplified == Expression(Constant(0.0))


def test_depth_cap_is_enforced():
    node = x
    for _ in range(20):
        node = Sine(node)
    expr = Expression(node)
    assert expr.depth() == 21

    set_config(max_tree_depth=10)
    with pytest.raises(ExpressionDepthError):
        expr.evaluate(0.5)
    with pytest.raises(ExpressionDepthError):
        expr.derivative()


def test_rendering_and_measures():
    expr = Expression(Sum(x, Constant(1.0)))
    assert expr.to_string() == "x + 1.000000"
    assert str(expr) == "x + 1.000000"
    assert expr.size() == 3
    assert expr.complexity() > 0


def test_sympy_conversion():
    expr = Expression(Sum(Sine(x), Polynomial(x, 2.0)))
    symbol = sp.Symbol("x", real=True)
    assert expr.to_sympy() == sp.sin(symbol) + symbol ** 2
    assert "sin" in expr.latex()


def test_structural_equality_and_hashing():
    a = Expression(Tangent(x))
    b = Expression(Tangent(Variable("x")))
    assert a == b
    assert len({a, b}) == 1
    assert a != Expression(Cosine(x))
    assert a != "tan(x)"


def test_copy_is_independent():
    expr = Expression(Sine(x))
    clone = expr.copy()
    assert clone == expr
    assert clone.root is not expr.root


def test_simplification_report():
    from symbolic_calculus import SymPyBridge

    report = SymPyBridge().simplification_report(Sum(Sine(x), Sine(x)))
    assert report['simplified_complexity'] <= report['original_complexity']
    assert report['sympy_complexity'] <= report['original_complexity']
    assert report['strategy_used'] in ('none', 'simplify', 'expand', 'trigsimp', 'logcombine')


def test_comparison_with_foreign_types_defers_to_the_other_operand():
    class AlwaysEqual:
        def __eq__(self, other):
            return True

    expr = Expression(Sine(x))
    assert expr.__eq__(Sine(x)) is NotImplemented
    assert expr == AlwaysEqual()
