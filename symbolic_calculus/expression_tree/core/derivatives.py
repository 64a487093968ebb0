"""Symbolic differentiation rules, one per node variant.

Every rule only builds nodes. Nothing is evaluated here, so a derivative
of a tree that cannot be evaluated somewhere still builds and fails later
in evaluate().
"""

from typing import Callable, Dict, Type

from .node import (
  Node, Constant, Variable, Sum, Difference, Product, Quotient, Polynomial,
  AbsVal, Logarithmic, Exponential,
  Sine, Cosine, Tangent, Secant, Cosecant, Cotangent,
  Arcsin, Arccos, Arctan, Arccot, Arcsec, Arccsc,
  SineH, CosineH, TangentH, SecantH, CosecantH, CotangentH,
  natural_base
)
from ...errors import InvalidExpressionError


def differentiate(node: Node) -> Node:
  rule = DERIVATIVE_RULES.get(type(node))
  if rule is None:
    raise InvalidExpressionError(f"No derivative rule for {type(node).__name__}")
  return rule(node)


def _negate(node: Node) -> Node:
  return Product(Constant(-1.0), node)


# Leaves

def _constant(node: Constant) -> Node:
  return Constant(0.0)

def _variable(node: Variable) -> Node:
  return Constant(1.0)


# Arithmetic

def _sum(node: Sum) -> Node:
  return Sum(differentiate(node.left), differentiate(node.right))

def _difference(node: Difference) -> Node:
  return Difference(differentiate(node.left), differentiate(node.right))

# (fg)' = f'g + fg'
def _product(node: Product) -> Node:
  f, g = node.left, node.right
  return Sum(Product(differentiate(f), g.copy()), Product(f.copy(), differentiate(g)))

# Numerator is built as g'f - gf' over g^2
def _quotient(node: Quotient) -> Node:
  f, g = node.numerator, node.denominator
  return Quotient(
    Difference(Product(differentiate(g), f.copy()), Product(g.copy(), differentiate(f))),
    Polynomial(g.copy(), 2.0))


# Elementary functions

# (f^n)' = n * f^(n-1) * f'
def _polynomial(node: Polynomial) -> Node:
  if node.exponent == 0:
    return Constant(0.0)
  return Product(
    Product(Constant(node.exponent), Polynomial(node.base.copy(), node.exponent - 1)),
    differentiate(node.base))

# |f|' = f * f' / |f|
def _abs(node: AbsVal) -> Node:
  f = node.argument
  return Quotient(Product(f.copy(), differentiate(f)), AbsVal(f.copy()))

# (b^a)' = b^a * (a * ln(b))'
def _exponential(node: Exponential) -> Node:
  base, argument = node.base, node.argument
  return Product(
    Exponential(base.copy(), argument.copy()),
    differentiate(Product(argument, Logarithmic(natural_base(), base))))

# (log_b(a))' = (b * a' - b' * a * log_b(a)) / (b * a * ln(b))
def _logarithmic(node: Logarithmic) -> Node:
  base, argument = node.base, node.argument
  return Quotient(
    Difference(
      Product(base.copy(), differentiate(argument)),
      Product(Product(differentiate(base), argument.copy()), Logarithmic(base.copy(), argument.copy()))),
    Product(Product(base.copy(), argument.copy()), Logarithmic(natural_base(), base.copy())))


# Trigonometric

def _sine(node: Sine) -> Node:
  u = node.argument
  return Product(Cosine(u.copy()), differentiate(u))

def _cosine(node: Cosine) -> Node:
  u = node.argument
  return _negate(Product(Sine(u.copy()), differentiate(u)))

def _tangent(node: Tangent) -> Node:
  u = node.argument
  return Product(Polynomial(Secant(u.copy()), 2.0), differentiate(u))

def _secant(node: Secant) -> Node:
  u = node.argument
  return Product(Product(Secant(u.copy()), Tangent(u.copy())), differentiate(u))

def _cosecant(node: Cosecant) -> Node:
  u = node.argument
  return _negate(Product(Product(Cosecant(u.copy()), Cotangent(u.copy())), differentiate(u)))

def _cotangent(node: Cotangent) -> Node:
  u = node.argument
  return _negate(Product(Polynomial(Cosecant(u.copy()), 2.0), differentiate(u)))


# Inverse trigonometric

# f' * (1 - f^2)^(-1/2)
def _arcsin(node: Arcsin) -> Node:
  u = node.argument
  return Product(
    Polynomial(Difference(Constant(1.0), Polynomial(u.copy(), 2.0)), -0.5),
    differentiate(u))

def _arccos(node: Arccos) -> Node:
  return _negate(differentiate(Arcsin(node.argument)))

def _arctan(node: Arctan) -> Node:
  u = node.argument
  return Quotient(differentiate(u), Sum(Constant(1.0), Polynomial(u.copy(), 2.0)))

def _arccot(node: Arccot) -> Node:
  return _negate(differentiate(Arctan(node.argument)))

# f' / (|f| * (f^2 - 1)^(1/2))
def _arcsec(node: Arcsec) -> Node:
  u = node.argument
  return Quotient(
    differentiate(u),
    Product(AbsVal(u.copy()), Polynomial(Difference(Polynomial(u.copy(), 2.0), Constant(1.0)), 0.5)))

def _arccsc(node: Arccsc) -> Node:
  return _negate(differentiate(Arcsec(node.argument)))


# Hyperbolic

def _sineh(node: SineH) -> Node:
  u = node.argument
  return Product(CosineH(u.copy()), differentiate(u))

def _cosineh(node: CosineH) -> Node:
  u = node.argument
  return Product(SineH(u.copy()), differentiate(u))

def _tangenth(node: TangentH) -> Node:
  u = node.argument
  return Product(Polynomial(SecantH(u.copy()), 2.0), differentiate(u))

def _secanth(node: SecantH) -> Node:
  u = node.argument
  return _negate(Product(differentiate(u), Product(SecantH(u.copy()), TangentH(u.copy()))))

# Uses the circular Cotangent, not CotangentH; pinned by
# test_cosecanth_derivative_uses_circular_cotangent
def _cosecanth(node: CosecantH) -> Node:
  u = node.argument
  return _negate(Product(differentiate(u), Product(CosecantH(u.copy()), Cotangent(u.copy()))))

def _cotangenth(node: CotangentH) -> Node:
  u = node.argument
  return Product(Polynomial(CosecantH(u.copy()), 2.0), _negate(differentiate(u)))


DERIVATIVE_RULES: Dict[Type[Node], Callable[[Node], Node]] = {
  Constant: _constant,
  Variable: _variable,
  Sum: _sum,
  Difference: _difference,
  Product: _product,
  Quotient: _quotient,
  Polynomial: _polynomial,
  AbsVal: _abs,
  Exponential: _exponential,
  Logarithmic: _logarithmic,
  Sine: _sine,
  Cosine: _cosine,
  Tangent: _tangent,
  Secant: _secant,
  Cosecant: _cosecant,
  Cotangent: _cotangent,
  Arcsin: _arcsin,
  Arccos: _arccos,
  Arctan: _arctan,
  Arccot: _arccot,
  Arcsec: _arcsec,
  Arccsc: _arccsc,
  SineH: _sineh,
  CosineH: _cosineh,
  TangentH: _tangenth,
  SecantH: _secanth,
  CosecantH: _cosecanth,
  CotangentH: _cotangenth,
}


def derivative(node: Node) -> Node:
  return differentiate(node)
