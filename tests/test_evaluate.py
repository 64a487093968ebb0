import math

import pytest

from symbolic_calculus import (
    Variable, Constant, Sum, Difference, Product, Quotient, Polynomial, AbsVal,
    Logarithmic, Exponential, Sine, Cosine, Tangent, Secant, Cosecant, Cotangent,
    Arcsin, Arctan, Arccot, Arcsec, Arccsc, SineH, CosineH, SecantH, CosecantH, CotangentH,
    evaluate, DivisionByZeroError, InvalidExpressionError
)
from symbolic_calculus.expression_tree.core.operators import snap_unit

x = Variable("x")


def test_leaves():
    assert evaluate(Constant(3.5), 10.0) == 3.5
    assert evaluate(x, 2.0) == 2.0
    # The name is for display only
    assert evaluate(Variable("t"), -4.0) == -4.0


def test_arithmetic():
    assert evaluate(Sum(x, Constant(1.0)), 2.0) == 3.0
    assert evaluate(Difference(x, Constant(1.0)), 2.0) == 1.0
    assert evaluate(Product(x, Constant(3.0)), 2.0) == 6.0
    assert evaluate(Quotient(x, Constant(4.0)), 2.0) == 0.5


def test_sine_of_zero_snaps_to_exact_zero():
    assert evaluate(Sine(Constant(0.0)), 0.0) == 0.0
    assert evaluate(Sine(Constant(math.pi)), 0.0) == 0.0
    assert evaluate(Cosine(Constant(math.pi / 2)), 0.0) == 0.0


def test_results_near_one_snap_to_exact_one():
    assert evaluate(Tangent(Constant(math.pi / 4)), 0.0) == 1.0
    assert evaluate(Cosine(x), 0.0) == 1.0


def test_snap_leaves_other_values_alone():
    assert snap_unit(0.5) == 0.5
    assert snap_unit(1e-10) == 1e-10
    assert snap_unit(-1e-13) == 0.0
    assert snap_unit(1.0 + 2e-12) == 1.0 + 2e-12


def test_snap_windows_are_closed_on_both_sides():
    assert snap_unit(1e-12) == 0.0
    assert snap_unit(-1e-12) == 0.0
    assert snap_unit(1.0 + 5e-13) == 1.0
    assert snap_unit(1.0 - 5e-13) == 1.0
    assert snap_unit(1.0 - 2e-12) == 1.0 - 2e-12


def test_quotient_with_zero_denominator_fails():
    with pytest.raises(DivisionByZeroError):
        evaluate(Quotient(Constant(1.0), Difference(x, x)), 5.0)


def test_quotient_evaluates_denominator_at_the_given_point():
    node = Quotient(Constant(1.0), x)
    assert evaluate(node, 4.0) == 0.25
    with pytest.raises(DivisionByZeroError):
        evaluate(node, 0.0)


def test_division_error_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        evaluate(Quotient(x, x), 0.0)


@pytest.mark.parametrize("node, point", [
    (Secant(x), math.pi / 2),
    (Cosecant(x), 0.0),
    (Cotangent(x), 0.0),
    (Cosecant(x), math.pi),
    (CosecantH(x), 0.0),
    (CotangentH(x), 0.0),
])
def test_reciprocal_functions_fail_at_poles(node, point):
    with pytest.raises(DivisionByZeroError):
        evaluate(node, point)


@pytest.mark.parametrize("node", [Arccot(x), Arcsec(x), Arccsc(x)])
def test_inverse_reciprocal_functions_fail_at_zero(node):
    with pytest.raises(DivisionByZeroError):
        evaluate(node, 0.0)


def test_reciprocal_values():
    assert evaluate(Secant(x), 0.0) == 1.0
    assert evaluate(Cotangent(x), 1.0) == pytest.approx(1.0 / math.tan(1.0))
    assert evaluate(SecantH(x), 0.0) == 1.0
    assert evaluate(Arccot(x), 1.0) == pytest.approx(math.pi / 4)
    assert evaluate(Arcsec(x), 2.0) == pytest.approx(math.acos(0.5))
    assert evaluate(Arccsc(x), 2.0) == pytest.approx(math.asin(0.5))


def test_functions():
    assert evaluate(Arcsin(x), 0.5) == pytest.approx(math.asin(0.5))
    assert evaluate(Arctan(x), 2.0) == pytest.approx(math.atan(2.0))
    assert evaluate(SineH(x), 1.0) == pytest.approx(math.sinh(1.0))
    assert evaluate(CosineH(x), 0.0) == 1.0
    assert evaluate(AbsVal(Difference(x, Constant(5.0))), 2.0) == 3.0


def test_logarithm_and_exponential():
    assert evaluate(Logarithmic(Constant(2.0), Constant(8.0)), 0.0) == pytest.approx(3.0)
    assert evaluate(Logarithmic.natural(x), math.e) == pytest.approx(1.0)
    assert evaluate(Exponential.natural(x), 1.0) == pytest.approx(math.e)
    assert evaluate(Exponential(Constant(2.0), x), 10.0) == pytest.approx(1024.0)


def test_domain_violations_propagate_nan():
    assert math.isnan(evaluate(Logarithmic.natural(x), -1.0))
    assert math.isnan(evaluate(Polynomial(x, 1.0 / 3.0), -8.0))
    assert math.isnan(evaluate(Arcsin(x), 2.0))
    assert math.isinf(evaluate(Logarithmic.natural(x), 0.0))


def test_polynomial():
    assert evaluate(Polynomial(x, 2.0), -3.0) == 9.0
    assert evaluate(Polynomial(x, -1.0), 4.0) == 0.25
    assert evaluate(Polynomial(x, 0.5), 9.0) == 3.0


def test_constructors_reject_malformed_fields():
    with pytest.raises(InvalidExpressionError):
        Constant(float("nan"))
    with pytest.raises(InvalidExpressionError):
        Polynomial(x, float("inf"))
    with pytest.raises(InvalidExpressionError):
        Sum(x, 1.0)
    with pytest.raises(TypeError):
        Sine("x")
