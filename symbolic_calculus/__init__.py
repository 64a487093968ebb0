"""Symbolic Calculus Package

Expression trees of one real variable with evaluation, symbolic
differentiation, structural equality and rule-based simplification.
"""

from .expression_tree import (
  Expression, Node, Variable, Constant, BinaryOpNode, UnaryOpNode,
  Sum, Difference, Product, Quotient, Polynomial, AbsVal, Logarithmic, Exponential,
  Sine, Cosine, Tangent, Secant, Cosecant, Cotangent,
  Arcsin, Arccos, Arctan, Arccot, Arcsec, Arccsc,
  SineH, CosineH, TangentH, SecantH, CosecantH, CotangentH,
  evaluate, display, differentiate, derivative,
  ExpressionSimplifier, ExpressionValidator, SymPyBridge,
  simplify, simplify_to_fixpoint, is_equal
)
from .errors import (
  ExpressionError, DivisionByZeroError, DomainError, ExpressionDepthError,
  InvalidExpressionError
)
from .config import CalculusConfig, get_config, set_config, reset_config
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "Variable", "Constant", "BinaryOpNode", "UnaryOpNode",
  "Sum", "Difference", "Product", "Quotient", "Polynomial", "AbsVal", "Logarithmic", "Exponential",
  "Sine", "Cosine", "Tangent", "Secant", "Cosecant", "Cotangent",
  "Arcsin", "Arccos", "Arctan", "Arccot", "Arcsec", "Arccsc",
  "SineH", "CosineH", "TangentH", "SecantH", "CosecantH", "CotangentH",
  "evaluate", "display", "differentiate", "derivative",
  "ExpressionSimplifier", "ExpressionValidator", "SymPyBridge",
  "simplify", "simplify_to_fixpoint", "is_equal",
  "ExpressionError", "DivisionByZeroError", "DomainError", "ExpressionDepthError",
  "InvalidExpressionError",
  "CalculusConfig", "get_config", "set_config", "reset_config",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
