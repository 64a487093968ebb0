import math
from typing import Optional

from ..core.node import (
  Node, Constant, Variable, Sum, Difference, Product, Quotient, Polynomial,
  AbsVal, Logarithmic, Exponential, UnaryOpNode,
  Sine, Cosine, Tangent, Secant, Cosecant, Cotangent
)
from .tree_utils import is_equal
from ...config import get_config
from ...errors import DivisionByZeroError, DomainError
from ...logging_system import get_logger, LogLevel

# 1 / f(u) rewrites
RECIPROCAL_TRIG = {
  Sine: Cosecant,
  Cosine: Secant,
  Tangent: Cotangent,
  Cosecant: Sine,
  Secant: Cosine,
  Cotangent: Tangent,
}


def _is_constant(node: Node, value: float) -> bool:
  return isinstance(node, Constant) and node.value == value


def _fold(value: float, source: Node) -> Constant:
  """Constant from an evaluated subtree; non-finite results are errors"""
  if not math.isfinite(value):
    raise DomainError(f"Folding {source.to_string()} produced {value}", value)
  return Constant(value)


def _trace(rule: str, before: Node, after: Node) -> Node:
  logger = get_logger()
  if logger.should_log(LogLevel.VERBOSE):
    logger.rewrite(rule, before.to_string(), after.to_string())
  return after


class ExpressionSimplifier:
  """Rule-based simplifier.

  simplify_expression makes exactly one bottom-up pass: children are
  simplified first and the node's own rules then see the simplified
  children. A rewrite produced at one level is not revisited in the same
  pass, so e.g. Difference(0, 0) becomes Product(-1, 0) and only collapses
  to 0 on the next pass. simplify_to_fixpoint repeats passes until the
  tree stops changing.
  """

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    if isinstance(node, (Constant, Variable)):
      return node.copy()

    simplified_children = [ExpressionSimplifier.simplify_expression(child)
                           for child in node.children()]

    rule = _BINARY_RULES.get(type(node))
    if rule is not None:
      return rule(node, *simplified_children)

    if isinstance(node, Polynomial):
      return ExpressionSimplifier._simplify_polynomial(node, simplified_children[0])

    if isinstance(node, AbsVal):
      return AbsVal(simplified_children[0])

    if isinstance(node, UnaryOpNode):
      return ExpressionSimplifier._simplify_function(node, simplified_children[0])

    return node.rebuild(*simplified_children)

  @staticmethod
  def simplify_to_fixpoint(node: Node, max_passes: Optional[int] = None) -> Node:
    """Repeat single passes until structural equality reports no change"""
    if max_passes is None:
      max_passes = get_config().max_simplify_passes

    logger = get_logger()
    current = node
    for pass_number in range(1, max_passes + 1):
      simplified = ExpressionSimplifier.simplify_expression(current)
      if is_equal(simplified, current):
        logger.info(f"Simplification converged after {pass_number} pass(es)", LogLevel.DETAILED)
        return simplified
      current = simplified

    logger.warning(f"Simplification did not converge within {max_passes} passes: {current.to_string()}")
    return current

  @staticmethod
  def _simplify_sum(node: Sum, left: Node, right: Node) -> Node:
    if isinstance(left, Constant) and isinstance(right, Constant):
      return _trace('fold', node, _fold(left.value + right.value, node))
    if _is_constant(left, 0.0):
      return _trace('0 + f', node, right)
    if _is_constant(right, 0.0):
      return _trace('f + 0', node, left)
    if is_equal(left, right):
      return _trace('f + f', node, Product(Constant(2.0), left))
    return Sum(left, right)

  @staticmethod
  def _simplify_difference(node: Difference, left: Node, right: Node) -> Node:
    if _is_constant(left, 0.0):
      return _trace('0 - f', node, Product(Constant(-1.0), right))
    if _is_constant(right, 0.0):
      return _trace('f - 0', node, left)
    if isinstance(left, Constant) and isinstance(right, Constant):
      return _trace('fold', node, _fold(left.value - right.value, node))
    if is_equal(left, right):
      return _trace('f - f', node, Constant(0.0))
    return Difference(left, right)

  @staticmethod
  def _simplify_product(node: Product, left: Node, right: Node) -> Node:
    if _is_constant(left, 0.0) or _is_constant(right, 0.0):
      return _trace('0 * f', node, Constant(0.0))
    if _is_constant(left, 1.0):
      return _trace('1 * f', node, right)
    if _is_constant(right, 1.0):
      return _trace('f * 1', node, left)
    if is_equal(left, right):
      return _trace('f * f', node, Polynomial(left, 2.0))
    return Product(left, right)

  @staticmethod
  def _simplify_quotient(node: Quotient, numerator: Node, denominator: Node) -> Node:
    if _is_constant(denominator, 1.0):
      return _trace('f / 1', node, numerator)
    if _is_constant(numerator, 0.0):
      return _trace('0 / f', node, Constant(0.0))
    if _is_constant(denominator, 0.0):
      raise DivisionByZeroError(f"Error denominator is 0 in {node.to_string()}")

    if (isinstance(numerator, Sine) and isinstance(denominator, Cosine)
        and is_equal(numerator.argument, denominator.argument)):
      return _trace('sin / cos', node, Tangent(numerator.argument))
    if (isinstance(numerator, Cosine) and isinstance(denominator, Sine)
        and is_equal(numerator.argument, denominator.argument)):
      return _trace('cos / sin', node, Cotangent(numerator.argument))

    if _is_constant(numerator, 1.0):
      reciprocal = RECIPROCAL_TRIG.get(type(denominator))
      if reciprocal is not None:
        return _trace('1 / trig', node, reciprocal(denominator.argument))

    return Quotient(numerator, denominator)

  @staticmethod
  def _simplify_logarithmic(node: Logarithmic, base: Node, argument: Node) -> Node:
    if is_equal(base, argument):
      return _trace('log_f(f)', node, Constant(1.0))
    if _is_constant(argument, 1.0):
      return _trace('log(1)', node, Constant(0.0))
    if isinstance(base, Constant) and isinstance(argument, Constant):
      folded = Logarithmic(base, argument)
      return _trace('fold', node, _fold(folded.evaluate(1.0), folded))
    return Logarithmic(base, argument)

  @staticmethod
  def _simplify_exponential(node: Exponential, base: Node, argument: Node) -> Node:
    if isinstance(base, Constant) and isinstance(argument, Constant):
      folded = Exponential(base, argument)
      return _trace('fold', node, _fold(folded.evaluate(1.0), folded))
    return Exponential(base, argument)

  @staticmethod
  def _simplify_polynomial(node: Polynomial, base: Node) -> Node:
    if isinstance(base, Constant):
      folded = Polynomial(base, node.exponent)
      return _trace('fold', node, _fold(folded.evaluate(1.0), folded))
    return Polynomial(base, node.exponent)

  @staticmethod
  def _simplify_function(node: UnaryOpNode, argument: Node) -> Node:
    """Trig, inverse trig and hyperbolic nodes.

    A constant argument is folded only when the whole node evaluates to an
    integer, so sin(0) becomes 0 while sin(2) stays symbolic.
    """
    rebuilt = node.rebuild(argument)
    if isinstance(argument, Constant):
      value = rebuilt.evaluate(1.0)
      if float(value).is_integer():
        return _trace('fold', node, Constant(value))
    return rebuilt


_BINARY_RULES = {
  Sum: ExpressionSimplifier._simplify_sum,
  Difference: ExpressionSimplifier._simplify_difference,
  Product: ExpressionSimplifier._simplify_product,
  Quotient: ExpressionSimplifier._simplify_quotient,
  Logarithmic: ExpressionSimplifier._simplify_logarithmic,
  Exponential: ExpressionSimplifier._simplify_exponential,
}


def simplify(node: Node) -> Node:
  return ExpressionSimplifier.simplify_expression(node)


def simplify_to_fixpoint(node: Node, max_passes: Optional[int] = None) -> Node:
  return ExpressionSimplifier.simplify_to_fixpoint(node, max_passes)
