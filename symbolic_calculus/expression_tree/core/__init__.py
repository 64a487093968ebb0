"""Core expression tree components."""

from .node import (
    Node, Variable, Constant, BinaryOpNode, UnaryOpNode,
    Sum, Difference, Product, Quotient, Polynomial, AbsVal, Logarithmic, Exponential,
    Sine, Cosine, Tangent, Secant, Cosecant, Cotangent,
    Arcsin, Arccos, Arctan, Arccot, Arcsec, Arccsc,
    SineH, CosineH, TangentH, SecantH, CosecantH, CotangentH,
    TRIGONOMETRIC_NODES, INVERSE_TRIGONOMETRIC_NODES, HYPERBOLIC_NODES, FUNCTION_NODES,
    COMPLEXITY_WEIGHTS, natural_base, is_natural_base, evaluate, display
)
from .operators import (
    NodeType, snap_unit,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_power, evaluate_unary_op
)
from .derivatives import differentiate, derivative, DERIVATIVE_RULES

__all__ = [
    'Node', 'Variable', 'Constant', 'BinaryOpNode', 'UnaryOpNode',
    'Sum', 'Difference', 'Product', 'Quotient', 'Polynomial', 'AbsVal', 'Logarithmic', 'Exponential',
    'Sine', 'Cosine', 'Tangent', 'Secant', 'Cosecant', 'Cotangent',
    'Arcsin', 'Arccos', 'Arctan', 'Arccot', 'Arcsec', 'Arccsc',
    'SineH', 'CosineH', 'TangentH', 'SecantH', 'CosecantH', 'CotangentH',
    'TRIGONOMETRIC_NODES', 'INVERSE_TRIGONOMETRIC_NODES', 'HYPERBOLIC_NODES', 'FUNCTION_NODES',
    'COMPLEXITY_WEIGHTS', 'natural_base', 'is_natural_base', 'evaluate', 'display',
    'NodeType', 'snap_unit',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_power', 'evaluate_unary_op',
    'differentiate', 'derivative', 'DERIVATIVE_RULES'
]
