"""
Error types raised by expression tree operations.

All errors derive from ExpressionError and also from the closest builtin
exception, so callers can catch either ``ZeroDivisionError`` or the
library-specific type.
"""


class ExpressionError(Exception):
    """Base class for expression tree errors"""


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    """A denominator or reciprocal-trig pole evaluated to zero"""


class DomainError(ExpressionError, ValueError):
    """A fold or a strict evaluation produced NaN or Inf"""

    def __init__(self, message: str, value: float = float('nan')):
        super().__init__(message)
        self.value = value


class ExpressionDepthError(ExpressionError, RecursionError):
    """Tree is deeper than the configured maximum depth"""

    def __init__(self, depth: int, max_depth: int):
        super().__init__(f"Expression depth {depth} exceeds maximum of {max_depth}")
        self.depth = depth
        self.max_depth = max_depth


class InvalidExpressionError(ExpressionError, TypeError):
    """Node constructed with malformed fields"""
