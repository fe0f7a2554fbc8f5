"""
Tree traversal primitives used by the selector engine.
"""

from typing import Any, Callable, List, Optional, TypeVar

from .nodes import children

R = TypeVar("R")


def descend_all(node: Any, predicate: Callable[[Any], Any]) -> List[Any]:
    """
    Collect every node of a subtree that satisfies a predicate.

    Children are visited left to right before the predicate is tested on the
    node itself, so descendants are listed before their ancestors.

    Args:
        node: Root of the subtree (included in the search)
        predicate: Called once per node; truthy results select the node

    Returns:
        List of selected nodes
    """
    selected = []
    # (node, expanded) pairs; a node is tested once its children are done
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            if predicate(current):
                selected.append(current)
            continue
        stack.append((current, True))
        for child in reversed(children(current)):
            stack.append((child, False))
    return selected


def descend_immediate_children(node: Any, fn: Callable[[Any], Optional[R]]) -> List[R]:
    """
    Apply a function to each direct child, keeping results that are not None.

    Args:
        node: The parent node
        fn: Called once per child, left to right

    Returns:
        List of results in child order
    """
    results = []
    for child in children(node):
        result = fn(child)
        if result is not None:
            results.append(result)
    return results
