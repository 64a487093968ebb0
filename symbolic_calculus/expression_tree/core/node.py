import math
import numbers
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, Tuple
from .operators import (
  NodeType, evaluate_variable, evaluate_constant, evaluate_binary_op,
  evaluate_power, evaluate_unary_op
)
from ...config import NATURAL_BASE, CONSTANT_DECIMALS
from ...errors import DivisionByZeroError, InvalidExpressionError

# Weights used by complexity(); simplification never increases size()
COMPLEXITY_WEIGHTS: Dict[str, float] = {
  # Binary operations
  '+': 1.0,
  '-': 1.0,
  '*': 1.1,
  '/': 1.5,
  'log': 1.6,
  'exp': 1.8,

  # Fixed exponent power
  '^': 1.4,

  'abs': 1.05,

  # Trigonometric
  'sin': 1.2,
  'cos': 1.2,
  'tan': 1.6,
  'sec': 1.7,
  'csc': 1.7,
  'cot': 1.7,

  # Inverse trigonometric
  'arcsin': 1.8,
  'arccos': 1.8,
  'arctan': 1.6,
  'arccot': 1.9,
  'arcsec': 2.0,
  'arccsc': 2.0,

  # Hyperbolic
  'sinh': 1.5,
  'cosh': 1.5,
  'tanh': 1.4,
  'sech': 1.7,
  'csch': 1.7,
  'coth': 1.7,

  # Terminal nodes
  'variable': 1.0,
  'constant': 1.0,
}

# Additive penalties for nestings that usually signal an unsimplified tree
COMBINATION_PENALTIES: Dict[tuple, float] = {
  ('log', 'exp'): 0.5,
  ('exp', 'log'): 0.5,
  ('/', '/'): 0.3,
  ('^', '^'): 0.6,
  ('sin', 'arcsin'): 0.4,
  ('cos', 'arccos'): 0.4,
  ('tan', 'arctan'): 0.4,
}


def _check_node(value, field: str) -> 'Node':
  if not isinstance(value, Node):
    raise InvalidExpressionError(f"{field} must be an expression node, got {type(value).__name__}")
  return value


def _check_real(value, field: str) -> float:
  if isinstance(value, bool) or not isinstance(value, numbers.Real):
    raise InvalidExpressionError(f"{field} must be a real number, got {type(value).__name__}")
  value = float(value)
  if not math.isfinite(value):
    raise InvalidExpressionError(f"{field} must be finite, got {value}")
  return value


def format_number(value: float) -> str:
  return f"{value:.{CONSTANT_DECIMALS}f}"


class Node(ABC):
  """Base node class with cached size, complexity and structural hash.

  Nodes are immutable once built. Every transformation returns a new tree,
  so the caches never go stale.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_complexity_cache')

  node_type: NodeType
  operator: str

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._complexity_cache: Optional[float] = None

  @abstractmethod
  def evaluate(self, x: float) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def rebuild(self, *children: 'Node') -> 'Node':
    """Same variant and scalar fields, new children"""
    pass

  @abstractmethod
  def to_sympy(self, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
    pass

  def scalar_fields(self) -> tuple:
    """Non-node fields that take part in structural equality"""
    return ()

  def copy(self) -> 'Node':
    return self.rebuild(*(child.copy() for child in self.children()))

  def display(self) -> str:
    return self.to_string()

  def derivative(self) -> 'Node':
    from .derivatives import differentiate
    return differentiate(self)

  def simplify(self) -> 'Node':
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_expression(self)

  def is_equal(self, other: 'Node') -> bool:
    from ..utils.tree_utils import is_equal
    return is_equal(self, other)

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def complexity(self) -> float:
    """Weighted complexity score"""
    if self._complexity_cache is None:
      self._complexity_cache = self._compute_complexity()
    return self._complexity_cache

  def _compute_complexity(self) -> float:
    complexity = COMPLEXITY_WEIGHTS.get(self.operator, 1.0)
    for child in self.children():
      complexity += child.complexity()
      complexity += COMBINATION_PENALTIES.get((self.operator, child.operator), 0.0)
    return complexity

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash((type(self).__name__, self.scalar_fields(),
                               tuple(hash(child) for child in self.children())))
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self.is_equal(other)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    args = [repr(value) for value in self.scalar_fields()]
    args.extend(repr(child) for child in self.children())
    return f"{type(self).__name__}({', '.join(args)})"


class Variable(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE
  operator = 'variable'

  def __init__(self, name: str = 'x'):
    super().__init__()
    if not isinstance(name, str) or not name:
      raise InvalidExpressionError(f"Variable name must be a non-empty string, got {name!r}")
    self.name = name

  def evaluate(self, x: float) -> float:
    return evaluate_variable(x)

  def to_string(self) -> str:
    return self.name

  def children(self):
    return ()

  def rebuild(self, *children):
    return Variable(self.name)

  def scalar_fields(self):
    return (self.name,)

  def to_sympy(self, symbol=None):
    return symbol if symbol is not None else sp.Symbol(self.name)


class Constant(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT
  operator = 'constant'

  def __init__(self, value: float):
    super().__init__()
    self.value = _check_real(value, 'Constant value')

  def evaluate(self, x: float) -> float:
    return evaluate_constant(self.value)

  def to_string(self) -> str:
    return format_number(self.value)

  def children(self):
    return ()

  def rebuild(self, *children):
    return Constant(self.value)

  def scalar_fields(self):
    return (self.value,)

  def to_sympy(self, symbol=None):
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    if self.value == NATURAL_BASE:
      return sp.E
    return sp.Float(self.value)


def natural_base() -> Constant:
  return Constant(NATURAL_BASE)


def is_natural_base(node: Node) -> bool:
  return isinstance(node, Constant) and node.value == NATURAL_BASE


class BinaryOpNode(Node):
  __slots__ = ('left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, left: Node, right: Node):
    super().__init__()
    self.left = _check_node(left, f"{type(self).__name__} left operand")
    self.right = _check_node(right, f"{type(self).__name__} right operand")

  def evaluate(self, x: float) -> float:
    return evaluate_binary_op(self.left.evaluate(x), self.right.evaluate(x), self.operator)

  def to_string(self) -> str:
    return f"{self.left.to_string()} {self.operator} {self.right.to_string()}"

  def children(self):
    return (self.left, self.right)

  def rebuild(self, *children):
    return type(self)(*children)


class Sum(BinaryOpNode):
  __slots__ = ()
  operator = '+'

  def to_sympy(self, symbol=None):
    return sp.Add(self.left.to_sympy(symbol), self.right.to_sympy(symbol))


class Difference(BinaryOpNode):
  __slots__ = ()
  operator = '-'

  def to_sympy(self, symbol=None):
    return sp.Add(self.left.to_sympy(symbol), sp.Mul(-1, self.right.to_sympy(symbol)))


class Product(BinaryOpNode):
  __slots__ = ()
  operator = '*'

  def to_string(self) -> str:
    return f"({self.left.to_string()}) * ({self.right.to_string()})"

  def to_sympy(self, symbol=None):
    return sp.Mul(self.left.to_sympy(symbol), self.right.to_sympy(symbol))


class Quotient(BinaryOpNode):
  __slots__ = ()
  operator = '/'

  @property
  def numerator(self) -> Node:
    return self.left

  @property
  def denominator(self) -> Node:
    return self.right

  def evaluate(self, x: float) -> float:
    denominator = self.denominator.evaluate(x)
    if denominator == 0.0:
      raise DivisionByZeroError(f"Error divide by 0: {self.denominator.to_string()} is 0 at x = {x}")
    return evaluate_binary_op(self.numerator.evaluate(x), denominator, '/')

  def to_string(self) -> str:
    return f"({self.numerator.to_string()}) / ({self.denominator.to_string()})"

  def to_sympy(self, symbol=None):
    return sp.Mul(self.numerator.to_sympy(symbol), sp.Pow(self.denominator.to_sympy(symbol), -1))


class Logarithmic(BinaryOpNode):
  """log_base(argument); ln when the base is Constant(e)"""

  __slots__ = ()
  operator = 'log'

  @classmethod
  def natural(cls, argument: Node) -> 'Logarithmic':
    return cls(natural_base(), argument)

  @property
  def base(self) -> Node:
    return self.left

  @property
  def argument(self) -> Node:
    return self.right

  def to_string(self) -> str:
    if is_natural_base(self.base):
      return f"ln({self.argument.to_string()})"
    return f"log_{self.base.to_string()}({self.argument.to_string()})"

  def to_sympy(self, symbol=None):
    if is_natural_base(self.base):
      return sp.log(self.argument.to_sympy(symbol))
    return sp.log(self.argument.to_sympy(symbol), self.base.to_sympy(symbol))


class Exponential(BinaryOpNode):
  """base^argument with an expression as the exponent"""

  __slots__ = ()
  operator = 'exp'

  @classmethod
  def natural(cls, argument: Node) -> 'Exponential':
    return cls(natural_base(), argument)

  @property
  def base(self) -> Node:
    return self.left

  @property
  def argument(self) -> Node:
    return self.right

  def to_string(self) -> str:
    if is_natural_base(self.base):
      return f"e^{self.argument.to_string()}"
    return f"{self.base.to_string()}^{self.argument.to_string()}"

  def to_sympy(self, symbol=None):
    if is_natural_base(self.base):
      return sp.exp(self.argument.to_sympy(symbol))
    return sp.Pow(self.base.to_sympy(symbol), self.argument.to_sympy(symbol))


class Polynomial(Node):
  """base^exponent where the exponent is a fixed real number"""

  __slots__ = ('base', 'exponent')

  node_type = NodeType.POWER_OP
  operator = '^'

  def __init__(self, base: Node, exponent: float):
    super().__init__()
    self.base = _check_node(base, 'Polynomial base')
    self.exponent = _check_real(exponent, 'Polynomial exponent')

  @property
  def coefficient(self) -> Node:
    return self.base

  def evaluate(self, x: float) -> float:
    return evaluate_power(self.base.evaluate(x), self.exponent)

  def to_string(self) -> str:
    return f"{self.base.to_string()}^{format_number(self.exponent)}"

  def children(self):
    return (self.base,)

  def rebuild(self, *children):
    return Polynomial(children[0], self.exponent)

  def scalar_fields(self):
    return (self.exponent,)

  def __repr__(self) -> str:
    return f"Polynomial({self.base!r}, {self.exponent!r})"

  def to_sympy(self, symbol=None):
    if self.exponent.is_integer():
      exponent = sp.Integer(int(self.exponent))
    else:
      exponent = sp.Rational(self.exponent).limit_denominator(1000)
    return sp.Pow(self.base.to_sympy(symbol), exponent)


class UnaryOpNode(Node):
  """Single-argument function; evaluation goes through evaluate_unary_op"""

  __slots__ = ('argument',)

  node_type = NodeType.UNARY_OP
  sympy_name: str

  def __init__(self, argument: Node):
    super().__init__()
    self.argument = _check_node(argument, f"{type(self).__name__} argument")

  def evaluate(self, x: float) -> float:
    return evaluate_unary_op(self.argument.evaluate(x), self.operator)

  def to_string(self) -> str:
    return f"{self.operator}({self.argument.to_string()})"

  def children(self):
    return (self.argument,)

  def rebuild(self, *children):
    return type(self)(children[0])

  def to_sympy(self, symbol=None):
    return getattr(sp, self.sympy_name)(self.argument.to_sympy(symbol))


class AbsVal(UnaryOpNode):
  __slots__ = ()
  operator = 'abs'
  sympy_name = 'Abs'

  def to_string(self) -> str:
    return f"| {self.argument.to_string()} |"


class Sine(UnaryOpNode):
  __slots__ = ()
  operator = 'sin'
  sympy_name = 'sin'

class Cosine(UnaryOpNode):
  __slots__ = ()
  operator = 'cos'
  sympy_name = 'cos'

class Tangent(UnaryOpNode):
  __slots__ = ()
  operator = 'tan'
  sympy_name = 'tan'

class Secant(UnaryOpNode):
  __slots__ = ()
  operator = 'sec'
  sympy_name = 'sec'

class Cosecant(UnaryOpNode):
  __slots__ = ()
  operator = 'csc'
  sympy_name = 'csc'

class Cotangent(UnaryOpNode):
  __slots__ = ()
  operator = 'cot'
  sympy_name = 'cot'


class Arcsin(UnaryOpNode):
  __slots__ = ()
  operator = 'arcsin'
  sympy_name = 'asin'

class Arccos(UnaryOpNode):
  __slots__ = ()
  operator = 'arccos'
  sympy_name = 'acos'

class Arctan(UnaryOpNode):
  __slots__ = ()
  operator = 'arctan'
  sympy_name = 'atan'

class Arccot(UnaryOpNode):
  __slots__ = ()
  operator = 'arccot'
  sympy_name = 'acot'

class Arcsec(UnaryOpNode):
  __slots__ = ()
  operator = 'arcsec'
  sympy_name = 'asec'

class Arccsc(UnaryOpNode):
  __slots__ = ()
  operator = 'arccsc'
  sympy_name = 'acsc'


class SineH(UnaryOpNode):
  __slots__ = ()
  operator = 'sinh'
  sympy_name = 'sinh'

class CosineH(UnaryOpNode):
  __slots__ = ()
  operator = 'cosh'
  sympy_name = 'cosh'

class TangentH(UnaryOpNode):
  __slots__ = ()
  operator = 'tanh'
  sympy_name = 'tanh'

class SecantH(UnaryOpNode):
  __slots__ = ()
  operator = 'sech'
  sympy_name = 'sech'

class CosecantH(UnaryOpNode):
  __slots__ = ()
  operator = 'csch'
  sympy_name = 'csch'

class CotangentH(UnaryOpNode):
  __slots__ = ()
  operator = 'coth'
  sympy_name = 'coth'


TRIGONOMETRIC_NODES = (Sine, Cosine, Tangent, Secant, Cosecant, Cotangent)
INVERSE_TRIGONOMETRIC_NODES = (Arcsin, Arccos, Arctan, Arccot, Arcsec, Arccsc)
HYPERBOLIC_NODES = (SineH, CosineH, TangentH, SecantH, CosecantH, CotangentH)
FUNCTION_NODES = TRIGONOMETRIC_NODES + INVERSE_TRIGONOMETRIC_NODES + HYPERBOLIC_NODES


def evaluate(node: Node, x: float) -> float:
  return node.evaluate(x)


def display(node: Node) -> str:
  return node.to_string()
