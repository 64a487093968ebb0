import math
import numpy as np
import sympy as sp
from typing import Optional, Sequence

from .core.node import Node
from .utils.simplifier import ExpressionSimplifier
from .utils.tree_utils import calculate_tree_depth, is_equal
from .utils.sympy_utils import SymPyBridge
from ..config import get_config
from ..errors import DomainError, ExpressionDepthError


class Expression:
  """Root-holding wrapper with a cached rendering and a depth guard.

  Operations on the wrapper check the configured maximum depth first, so a
  pathological tree fails with ExpressionDepthError instead of exhausting
  the interpreter stack part way through a traversal.
  """

  __slots__ = ('root', '_string_cache', '_depth_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None
    self._depth_cache: Optional[int] = None

  def depth(self) -> int:
    if self._depth_cache is None:
      self._depth_cache = calculate_tree_depth(self.root)
    return self._depth_cache

  def _check_depth(self):
    max_depth = get_config().max_tree_depth
    if self.depth() > max_depth:
      raise ExpressionDepthError(self.depth(), max_depth)

  def evaluate(self, x: float, strict: bool = False) -> float:
    """Value at x. With strict=True a NaN or Inf result raises DomainError."""
    self._check_depth()
    value = self.root.evaluate(x)
    if strict and not math.isfinite(value):
      raise DomainError(f"{self.to_string()} evaluates to {value} at x = {x}", value)
    return value

  def evaluate_many(self, xs: Sequence[float]) -> np.ndarray:
    self._check_depth()
    points = np.asarray(xs, dtype=np.float64).ravel()
    return np.array([self.root.evaluate(float(x)) for x in points], dtype=np.float64)

  def derivative(self) -> 'Expression':
    self._check_depth()
    return Expression(self.root.derivative())

  def simplify(self, fixpoint: bool = False) -> 'Expression':
    self._check_depth()
    if fixpoint:
      return Expression(ExpressionSimplifier.simplify_to_fixpoint(self.root))
    return Expression(ExpressionSimplifier.simplify_expression(self.root))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._check_depth()
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    self._check_depth()
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def complexity(self) -> float:
    """Weighted complexity score"""
    return self.root.complexity()

  def to_sympy(self) -> sp.Expr:
    return SymPyBridge().to_sympy(self.root)

  def latex(self) -> str:
    return SymPyBridge().latex_representation(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return is_equal(self.root, other.root)
