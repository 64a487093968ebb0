"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, simplify, simplify_to_fixpoint
from .sympy_utils import SymPyBridge
from .validator import ExpressionValidator
from .tree_utils import (
    is_equal, get_all_nodes, calculate_tree_depth,
    find_nodes_by_type, find_nodes_by_operator, contains_subtree,
    clone_tree,
    get_constants, get_variables, get_variable_names
)

__all__ = [
    'ExpressionSimplifier', 'simplify', 'simplify_to_fixpoint',
    'SymPyBridge', 'ExpressionValidator',
    'is_equal', 'get_all_nodes', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator', 'contains_subtree',
    'clone_tree',
    'get_constants', 'get_variables', 'get_variable_names'
]
