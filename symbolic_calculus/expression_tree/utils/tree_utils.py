"""
Tree Utility Functions

Traversal, comparison and lookup helpers for expression trees. Everything
here walks the tree with an explicit stack, so deep trees are limited by
memory rather than by the interpreter's recursion limit.
"""

import math
from typing import List, Set

from ..core.node import Node, Constant, Variable


def _same_scalars(a: tuple, b: tuple) -> bool:
    """Bit-identical floats: 0.0 and -0.0 differ"""
    if len(a) != len(b):
        return False
    for left, right in zip(a, b):
        if left != right:
            return False
        if isinstance(left, float) and math.copysign(1.0, left) != math.copysign(1.0, right):
            return False
    return True


def is_equal(a: Node, b: Node) -> bool:
    """
    Structural equality of two trees.

    Same variant at every position and identical scalar fields (constant
    values, variable names, polynomial exponents) compared bit for bit. This is
    not numeric equivalence: ``x + 0`` and ``x`` are different trees.
    """
    pending = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left is right:
            continue
        if type(left) is not type(right):
            return False
        if not _same_scalars(left.scalar_fields(), right.scalar_fields()):
            return False
        left_children = left.children()
        right_children = right.children()
        if len(left_children) != len(right_children):
            return False
        pending.extend(zip(left_children, right_children))
    return True


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left child first"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]

    while stack:
        current_node, depth = stack.pop()
        if depth > max_depth:
            max_depth = depth
        for child in current_node.children():
            stack.append((child, depth + 1))

    return max_depth


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes that are instances of node_type"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """Find all nodes rendered with the given operator name, e.g. 'sin' or '+'"""
    return [n for n in get_all_nodes(node) if n.operator == operator]


def contains_subtree(node: Node, target: Node) -> bool:
    """True if some subtree of node is structurally equal to target"""
    return any(is_equal(candidate, target) for candidate in get_all_nodes(node))


def clone_tree(node: Node) -> Node:
    """Deep copy; the clone shares no nodes with the original"""
    return node.copy()


def get_constants(node: Node) -> List[Constant]:
    return find_nodes_by_type(node, Constant)


def get_variables(node: Node) -> List[Variable]:
    return find_nodes_by_type(node, Variable)


def get_variable_names(node: Node) -> Set[str]:
    return {variable.name for variable in get_variables(node)}
