import numpy as np
import numba
from enum import IntEnum

from ...config import EPSILON
from ...errors import DivisionByZeroError

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3
  POWER_OP = 4

# f(u) computed directly
DIRECT_KERNELS = {
    'abs': np.abs,
    'sin': np.sin, 'cos': np.cos, 'tan': np.tan,
    'arcsin': np.arcsin, 'arccos': np.arccos, 'arctan': np.arctan,
    'sinh': np.sinh, 'cosh': np.cosh, 'tanh': np.tanh,
}

# f(u) = 1 / g(u); a snapped zero g(u) is a pole
RECIPROCAL_KERNELS = {
    'sec': np.cos, 'csc': np.sin, 'cot': np.tan,
    'sech': np.cosh, 'csch': np.sinh, 'coth': np.tanh,
}

# f(u) = g(1 / u); u == 0 is a pole
INVERSE_RECIPROCAL_KERNELS = {
    'arccot': np.arctan, 'arcsec': np.arccos, 'arccsc': np.arcsin,
}

# Operators whose results are never snapped
UNSNAPPED_OPERATORS = frozenset({'abs'})

@numba.njit(cache=True)
def snap_unit(value):
  if abs(value) <= EPSILON:
    return 0.0
  if abs(value - 1.0) <= EPSILON:
    return 1.0
  return value

def evaluate_variable(x):
  return float(x)

def evaluate_constant(value):
  return value

def evaluate_binary_op(left_val, right_val, operator):
  """Combine two already evaluated operands with IEEE semantics.

  For 'log' the left operand is the base, for 'exp' the left operand is the
  base and the right one the exponent.
  """
  left_val = np.float64(left_val)
  right_val = np.float64(right_val)
  with np.errstate(all='ignore'):
    if operator == '+':
      return float(left_val + right_val)
    elif operator == '-':
      return float(left_val - right_val)
    elif operator == '*':
      return float(left_val * right_val)
    elif operator == '/':
      if right_val == 0.0:
        raise DivisionByZeroError("Error divide by 0")
      return float(left_val / right_val)
    elif operator == 'log':
      return float(np.log(right_val) / np.log(left_val))
    elif operator == 'exp':
      return float(np.power(left_val, right_val))
  raise ValueError(f"Unknown binary operator: {operator}")

def evaluate_power(base_val, exponent):
  with np.errstate(all='ignore'):
    return float(np.power(np.float64(base_val), np.float64(exponent)))

def evaluate_unary_op(operand_val, operator):
  """Apply a named elementary function, then the epsilon snap."""
  operand_val = np.float64(operand_val)
  with np.errstate(all='ignore'):
    if operator in DIRECT_KERNELS:
      result = float(DIRECT_KERNELS[operator](operand_val))
      if operator in UNSNAPPED_OPERATORS:
        return result
      return snap_unit(result)

    elif operator in RECIPROCAL_KERNELS:
      underlying = snap_unit(float(RECIPROCAL_KERNELS[operator](operand_val)))
      if underlying == 0.0:
        raise DivisionByZeroError(f"Error divide by 0: {operator} has a pole at {float(operand_val)}")
      return snap_unit(1.0 / underlying)

    elif operator in INVERSE_RECIPROCAL_KERNELS:
      if operand_val == 0.0:
        raise DivisionByZeroError(f"Error divide by 0: {operator} of 0")
      return snap_unit(float(INVERSE_RECIPROCAL_KERNELS[operator](1.0 / operand_val)))

  raise ValueError(f"Unknown unary operator: {operator}")
