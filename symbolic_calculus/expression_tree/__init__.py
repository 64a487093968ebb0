"""Expression Tree Module

Immutable expression trees of one real variable with evaluation,
differentiation, structural equality and simplification.
"""

from .expression import Expression
from .core.node import (
    Node, Variable, Constant, BinaryOpNode, UnaryOpNode,
    Sum, Difference, Product, Quotient, Polynomial, AbsVal, Logarithmic, Exponential,
    Sine, Cosine, Tangent, Secant, Cosecant, Cotangent,
    Arcsin, Arccos, Arctan, Arccot, Arcsec, Arccsc,
    SineH, CosineH, TangentH, SecantH, CosecantH, CotangentH,
    evaluate, display
)
from .core.operators import NodeType
from .core.derivatives import differentiate, derivative
from .utils import (
    ExpressionSimplifier, ExpressionValidator, SymPyBridge,
    simplify, simplify_to_fixpoint, is_equal, calculate_tree_depth
)

__all__ = [
    "Expression",
    "Node", "Variable", "Constant", "BinaryOpNode", "UnaryOpNode",
    "Sum", "Difference", "Product", "Quotient", "Polynomial", "AbsVal", "Logarithmic", "Exponential",
    "Sine", "Cosine", "Tangent", "Secant", "Cosecant", "Cotangent",
    "Arcsin", "Arccos", "Arctan", "Arccot", "Arcsec", "Arccsc",
    "SineH", "CosineH", "TangentH", "SecantH", "CosecantH", "CotangentH",
    "evaluate", "display", "differentiate", "derivative",
    "NodeType",
    "ExpressionSimplifier", "ExpressionValidator", "SymPyBridge",
    "simplify", "simplify_to_fixpoint", "is_equal", "calculate_tree_depth"
]
