"""
Tree node interface.
This module exposes a fixed set of named properties and navigation functions
over tree-sitter nodes. Selector names are resolved against these maps at walk
time; names outside the maps raise UnknownPropertyError instead of falling
back to attribute reflection.

Any object with the attributes of ``tree_sitter.Node`` used below can be
queried, which is how the tests build in-memory trees.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from ..errors import UnknownPropertyError

Scalar = Union[str, int, float, bool]


def _attribute(name: str) -> Callable[[Any], Any]:
    def accessor(node: Any) -> Any:
        return getattr(node, name, None)
    return accessor


def _text(node: Any) -> Optional[str]:
    text = getattr(node, "text", None)
    if isinstance(text, (bytes, bytearray)):
        return text.decode("utf-8", errors="replace")
    return text


def _child(node: Any, index: int) -> Optional[Any]:
    if index < 0 or index >= (getattr(node, "child_count", 0) or 0):
        return None
    return node.child(index)


def _named_child(node: Any, index: int) -> Optional[Any]:
    if index < 0 or index >= (getattr(node, "named_child_count", 0) or 0):
        return None
    return node.named_child(index)


def _first_child_for_index(node: Any, index: int) -> Optional[Any]:
    if index < 0:
        return None
    return node.first_child_for_byte(index)


def _first_named_child_for_index(node: Any, index: int) -> Optional[Any]:
    if index < 0:
        return None
    return node.first_named_child_for_byte(index)


def _last_child(node: Any) -> Optional[Any]:
    return _child(node, (getattr(node, "child_count", 0) or 0) - 1)


def _last_named_child(node: Any) -> Optional[Any]:
    return _named_child(node, (getattr(node, "named_child_count", 0) or 0) - 1)


def _with_aliases(entries: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    table = dict(entries)
    for alias, name in aliases.items():
        table[alias] = entries[name]
    return table


# Scalar properties readable by attribute selectors and pseudo-elements
SCALAR_PROPERTIES: Dict[str, Callable[[Any], Optional[Scalar]]] = _with_aliases({
    "type": _attribute("type"),
    "grammarType": _attribute("grammar_name"),
    "text": _text,
    "typeId": _attribute("kind_id"),
    "grammarId": _attribute("grammar_id"),
    "startIndex": _attribute("start_byte"),
    "endIndex": _attribute("end_byte"),
    "childCount": _attribute("child_count"),
    "namedChildCount": _attribute("named_child_count"),
    "descendantCount": _attribute("descendant_count"),
    "isNamed": _attribute("is_named"),
    "isMissing": _attribute("is_missing"),
    "isExtra": _attribute("is_extra"),
    "isError": _attribute("is_error"),
    "hasError": _attribute("has_error"),
}, {
    "grammar_name": "grammarType",
    "kind_id": "typeId",
    "grammar_id": "grammarId",
    "start_byte": "startIndex",
    "end_byte": "endIndex",
    "child_count": "childCount",
    "named_child_count": "namedChildCount",
    "descendant_count": "descendantCount",
    "is_named": "isNamed",
    "is_missing": "isMissing",
    "is_extra": "isExtra",
    "is_error": "isError",
    "has_error": "hasError",
})

# Properties that lead to another node, used by id selectors
NAVIGATION_PROPERTIES: Dict[str, Callable[[Any], Optional[Any]]] = _with_aliases({
    "parent": _attribute("parent"),
    "nextSibling": _attribute("next_sibling"),
    "previousSibling": _attribute("prev_sibling"),
    "nextNamedSibling": _attribute("next_named_sibling"),
    "previousNamedSibling": _attribute("prev_named_sibling"),
    "firstChild": lambda node: _child(node, 0),
    "lastChild": _last_child,
    "firstNamedChild": lambda node: _named_child(node, 0),
    "lastNamedChild": _last_named_child,
}, {
    "next_sibling": "nextSibling",
    "prev_sibling": "previousSibling",
    "next_named_sibling": "nextNamedSibling",
    "prev_named_sibling": "previousNamedSibling",
    "first_child": "firstChild",
    "last_child": "lastChild",
    "first_named_child": "firstNamedChild",
    "last_named_child": "lastNamedChild",
})

# Pseudo-class dispatch table: navigation functions of one integer
NAVIGATION_FUNCTIONS: Dict[str, Callable[[Any, int], Optional[Any]]] = _with_aliases({
    "child": _child,
    "namedChild": _named_child,
    "firstChildForIndex": _first_child_for_index,
    "firstNamedChildForIndex": _first_named_child_for_index,
}, {
    "named_child": "namedChild",
    "first_child_for_index": "firstChildForIndex",
    "first_named_child_for_index": "firstNamedChildForIndex",
})


def node_type(node: Any) -> Optional[str]:
    """Get the semantic type tag of a node."""
    return getattr(node, "type", None)


def children(node: Any) -> List[Any]:
    """
    Get all children of a node, named and anonymous, left to right.

    Args:
        node: The node

    Returns:
        List of child nodes
    """
    count = getattr(node, "child_count", 0) or 0
    return [node.child(i) for i in range(count)]


def get_scalar(node: Any, name: str) -> Optional[Scalar]:
    """
    Read a named scalar property.

    Args:
        node: The node to read from
        name: Property name, e.g. ``text`` or ``childCount``

    Returns:
        The property value, or None if the node has no value for it

    Raises:
        UnknownPropertyError: If the name is not a known scalar property
    """
    accessor = SCALAR_PROPERTIES.get(name)
    if accessor is None:
        raise UnknownPropertyError("property", name)
    return accessor(node)


def get_navigation(node: Any, name: str) -> Optional[Any]:
    """
    Follow a named navigational property.

    Args:
        node: The node to start from
        name: Property name, e.g. ``parent`` or ``nextSibling``

    Returns:
        The target node, or None if there is none

    Raises:
        UnknownPropertyError: If the name is not a known navigation property
    """
    accessor = NAVIGATION_PROPERTIES.get(name)
    if accessor is None:
        raise UnknownPropertyError("navigation property", name)
    return accessor(node)


def navigate(node: Any, name: str, index: int) -> Optional[Any]:
    """
    Call a named navigation function.

    Args:
        node: The node to start from
        name: Function name, e.g. ``namedChild``
        index: Integer argument

    Returns:
        The target node, or None if there is none

    Raises:
        UnknownPropertyError: If the name is not a known navigation function
    """
    function = NAVIGATION_FUNCTIONS.get(name)
    if function is None:
        raise UnknownPropertyError("pseudo-class", name)
    return function(node, index)
