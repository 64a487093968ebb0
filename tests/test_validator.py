import numpy as np
import pytest

from symbolic_calculus import (
    Variable, Constant, Sum, Quotient, Polynomial, Logarithmic, Sine,
    ExpressionValidator, ExpressionDepthError, InvalidExpressionError,
    DivisionByZeroError, DomainError
)

x = Variable("x")


def nested_sine(depth):
    node = x
    for _ in range(depth - 1):
        node = Sine(node)
    return node


def test_well_formed_tree_is_valid():
    assert ExpressionValidator.is_valid_expression(Sum(x, Constant(1.0)))
    assert ExpressionValidator.check_structure(Sum(x, Constant(1.0))) == 2


def test_shared_subtrees_are_allowed():
    shared = Sine(x)
    assert ExpressionValidator.is_valid_expression(Sum(shared, shared))


def test_depth_cap():
    node = nested_sine(10)
    assert ExpressionValidator.check_structure(node) == 10
    with pytest.raises(ExpressionDepthError) as excinfo:
        ExpressionValidator.check_structure(node, max_depth=5)
    assert excinfo.value.max_depth == 5
    assert not ExpressionValidator.is_valid_expression(node, max_depth=5)


def test_cycle_is_rejected():
    inner = Sine(x)
    outer = Sine(inner)
    inner.argument = outer
    with pytest.raises(InvalidExpressionError):
        ExpressionValidator.validate(outer)


def test_non_node_child_is_rejected():
    node = Sum(x, x)
    node.right = 3.0
    with pytest.raises(InvalidExpressionError):
        ExpressionValidator.validate(node)
    with pytest.raises(InvalidExpressionError):
        ExpressionValidator.validate("x + 1")


def test_non_finite_constant_is_rejected():
    node = Constant(1.0)
    node.value = float("inf")
    assert not ExpressionValidator.is_valid_expression(Sum(x, node))


def test_sample_points():
    xs = [-1.0, 0.0, 1.0]
    assert ExpressionValidator.is_valid_expression(Polynomial(x, 2.0), xs)
    assert not ExpressionValidator.is_valid_expression(Quotient(Constant(1.0), x), xs)
    assert not ExpressionValidator.is_valid_expression(Logarithmic.natural(x), xs)
    with pytest.raises(DivisionByZeroError):
        ExpressionValidator.validate(Quotient(Constant(1.0), x), xs)
    with pytest.raises(DomainError):
        ExpressionValidator.validate(Logarithmic.natural(x), xs)


def test_finite_sample_mask():
    xs = np.array([-1.0, 0.0, 1.0, 2.0])
    np.testing.assert_array_equal(
        ExpressionValidator.finite_sample_mask(Quotient(Constant(1.0), x), xs),
        [True, False, True, True])
    np.testing.assert_array_equal(
        ExpressionValidator.finite_sample_mask(Logarithmic.natural(x), xs),
        [False, False, True, True])
