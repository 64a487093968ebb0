import math
import sympy as sp
import numpy as np
from typing import Dict, Any, Sequence

from ..core.node import Node
from ...errors import DivisionByZeroError


class SymPyBridge:
  """Conversion to SymPy, plus SymPy as an independent oracle"""

  def __init__(self, symbol_name: str = 'x'):
    # Every Variable maps to this one symbol, matching evaluate()'s single
    # free variable semantics
    self.symbol = sp.Symbol(symbol_name, real=True)
    self.simplification_strategies = [
      'simplify',
      'expand',
      'trigsimp',
      'logcombine'
    ]

  def to_sympy(self, node: Node) -> sp.Expr:
    return node.to_sympy(self.symbol)

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(self.to_sympy(node))

  def verify_derivative(self, node: Node, xs: Sequence[float],
                        tolerance: float = 1e-9) -> Dict[str, Any]:
    """
    Compare node.derivative() against sympy.diff at sample points.

    Points where either side is undefined (pole, NaN, complex result) are
    skipped and counted in 'points_skipped'.

    Returns:
        Dict with 'matches', 'max_error', 'points_checked', 'points_skipped'
    """
    ours = node.derivative()
    # mpmath covers sec, csch, acot and friends, and returns complex values
    # outside the real domain instead of NaN
    reference = sp.lambdify(self.symbol, sp.diff(self.to_sympy(node), self.symbol), modules='mpmath')

    max_error = 0.0
    checked = 0
    skipped = 0
    for x in np.asarray(xs, dtype=np.float64).ravel():
      try:
        actual = ours.evaluate(float(x))
      except DivisionByZeroError:
        skipped += 1
        continue
      try:
        expected = complex(reference(float(x)))
      except ZeroDivisionError:
        skipped += 1
        continue
      if expected.imag != 0.0 or not (math.isfinite(actual) and math.isfinite(expected.real)):
        skipped += 1
        continue
      error = abs(actual - expected.real) / max(1.0, abs(expected.real))
      max_error = max(max_error, error)
      checked += 1

    return {
      'matches': checked > 0 and max_error <= tolerance,
      'max_error': max_error,
      'points_checked': checked,
      'points_skipped': skipped
    }

  def simplification_report(self, node: Node) -> Dict[str, Any]:
    """
    How far our simplify() is from what SymPy reaches on the same tree.

    Returns:
        Dict with SymPy's best form, the strategy that produced it and the
        operation counts before and after
    """
    sympy_expr = self.to_sympy(node)
    original_complexity = self._calculate_complexity(sympy_expr)
    ours_complexity = self._calculate_complexity(self.to_sympy(node.simplify()))

    best_simplified = sympy_expr
    best_complexity = original_complexity
    best_strategy = 'none'

    for strategy in self.simplification_strategies:
      if strategy == 'simplify':
        simplified = sp.simplify(sympy_expr)
      elif strategy == 'expand':
        simplified = sp.expand(sympy_expr)
      elif strategy == 'trigsimp':
        simplified = sp.trigsimp(sympy_expr)
      elif strategy == 'logcombine':
        simplified = sp.logcombine(sympy_expr)
      else:
        continue

      complexity = self._calculate_complexity(simplified)
      if complexity < best_complexity:
        best_simplified = simplified
        best_complexity = complexity
        best_strategy = strategy

    return {
      'sympy_simplified': best_simplified,
      'strategy_used': best_strategy,
      'original_complexity': original_complexity,
      'simplified_complexity': ours_complexity,
      'sympy_complexity': best_complexity
    }

  def _calculate_complexity(self, expr: sp.Expr) -> int:
    """Calculate expression complexity for SymPy expressions"""
    return len(expr.free_symbols) + len(expr.atoms(sp.Function)) + expr.count_ops()
