import math
import numpy as np
from typing import Optional, Sequence

from ..core.node import Node
from ..core.operators import NodeType
from ...config import get_config
from ...errors import (
  ExpressionError, DivisionByZeroError, DomainError, ExpressionDepthError,
  InvalidExpressionError
)
from ...logging_system import get_logger, LogLevel


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, xs: Optional[Sequence[float]] = None,
                          max_depth: Optional[int] = None) -> bool:
    try:
      ExpressionValidator.validate(node, xs, max_depth)
      return True
    except ExpressionError as error:
      get_logger().info(f"Rejected expression: {error}", LogLevel.MODERATE)
      return False

  @staticmethod
  def validate(node: Node, xs: Optional[Sequence[float]] = None,
               max_depth: Optional[int] = None) -> None:
    """Raise the matching ExpressionError if node is not a usable tree"""
    ExpressionValidator.check_structure(node, max_depth)
    if xs is not None:
      ExpressionValidator.check_evaluation(node, xs)

  @staticmethod
  def check_structure(node: Node, max_depth: Optional[int] = None) -> int:
    """Walk the tree once; return its depth.

    Rejects non-node children, cycles, non-finite constants or exponents,
    and trees deeper than max_depth (defaults to the configured cap). A
    subtree shared by two branches is allowed, a node that is its own
    ancestor is not.
    """
    if max_depth is None:
      max_depth = get_config().max_tree_depth
    if not isinstance(node, Node):
      raise InvalidExpressionError(f"Expected an expression node, got {type(node).__name__}")

    deepest = 0
    on_path = set()
    # (node, depth, leaving) entries; leaving marks the post-order pop
    stack = [(node, 1, False)]
    while stack:
      current, depth, leaving = stack.pop()
      if leaving:
        on_path.discard(id(current))
        continue

      if id(current) in on_path:
        raise InvalidExpressionError(f"Cycle detected at {type(current).__name__} node")
      if depth > max_depth:
        raise ExpressionDepthError(depth, max_depth)
      deepest = max(deepest, depth)

      if current.node_type == NodeType.CONSTANT and not math.isfinite(current.value):
        raise InvalidExpressionError(f"Constant value {current.value} is not finite")
      if current.node_type == NodeType.POWER_OP and not math.isfinite(current.exponent):
        raise InvalidExpressionError(f"Polynomial exponent {current.exponent} is not finite")

      on_path.add(id(current))
      stack.append((current, depth, True))
      for child in current.children():
        if not isinstance(child, Node):
          raise InvalidExpressionError(
            f"{type(current).__name__} has a child of type {type(child).__name__}")
        stack.append((child, depth + 1, False))

    return deepest

  @staticmethod
  def check_evaluation(node: Node, xs: Sequence[float]) -> None:
    """Every sample point must evaluate to a finite number"""
    for x in np.asarray(xs, dtype=np.float64).ravel():
      value = node.evaluate(float(x))
      if not math.isfinite(value):
        raise DomainError(f"{node.to_string()} evaluates to {value} at x = {float(x)}", value)

  @staticmethod
  def finite_sample_mask(node: Node, xs: Sequence[float]) -> np.ndarray:
    """Boolean mask of sample points where node evaluates to a finite value"""
    points = np.asarray(xs, dtype=np.float64).ravel()
    mask = np.zeros(points.shape[0], dtype=bool)
    for i, x in enumerate(points):
      try:
        mask[i] = math.isfinite(node.evaluate(float(x)))
      except DivisionByZeroError:
        mask[i] = False
    return mask
