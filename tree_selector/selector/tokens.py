"""
Selector token types.
This module defines the typed token sequence the selector walker consumes.
"""

import re
from enum import Enum
from typing import Any, Optional, Tuple


class TokenType(Enum):
    """Kinds of selector tokens."""
    CLASS = "class"
    ID = "id"
    ATTRIBUTE = "attribute"
    COMBINATOR = "combinator"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Combinator:
    """Combinator symbols understood by the walker."""
    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


ATTRIBUTE_OPERATORS = ("=", "~=", "|=", "^=", "$=", "*=")
CASE_FLAGS = ("i", "I", "s", "S")

_bare_value = re.compile(r"^(?:-?[A-Za-z_][A-Za-z0-9_-]*|[+-]?[0-9]+)$")


class Token:
    """
    Base class for selector tokens.

    Tokens are immutable value objects; two tokens are equal when they have
    the same type and the same fields.
    """

    type: TokenType
    __slots__ = ()

    def _fields(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.__slots__)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _init(self, **fields: Any) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"{type(self).__name__}({args})"


class ClassToken(Token):
    """`.name`: matches a node's type tag."""
    type = TokenType.CLASS
    __slots__ = ("name",)

    def __init__(self, name: str):
        self._init(name=name)

    def __str__(self) -> str:
        return f".{self.name}"


class IdToken(Token):
    """`#name`: moves to a navigational property such as ``parent``."""
    type = TokenType.ID
    __slots__ = ("name",)

    def __init__(self, name: str):
        self._init(name=name)

    def __str__(self) -> str:
        return f"#{self.name}"


class AttributeToken(Token):
    """
    `[name]`, `[name=value]`, `[name=value i]`: tests a scalar property.

    Args:
        name: Property name
        operator: One of ATTRIBUTE_OPERATORS, or None for an existence test
        value: Literal to compare against
        case_sensitivity: ``i``/``I``, ``s``/``S`` or None
    """
    type = TokenType.ATTRIBUTE
    __slots__ = ("name", "operator", "value", "case_sensitivity")

    def __init__(self, name: str, operator: Optional[str] = None,
                 value: Optional[str] = None, case_sensitivity: Optional[str] = None):
        self._init(name=name, operator=operator, value=value,
                   case_sensitivity=case_sensitivity)

    def __str__(self) -> str:
        if self.operator is None:
            return f"[{self.name}]"
        flag = f" {self.case_sensitivity}" if self.case_sensitivity else ""
        return f"[{self.name}{self.operator}{_quote(self.value)}{flag}]"


class CombinatorToken(Token):
    """A combinator between two compound selectors."""
    type = TokenType.COMBINATOR
    __slots__ = ("content",)

    def __init__(self, content: str):
        self._init(content=content)

    def __str__(self) -> str:
        if self.content == Combinator.DESCENDANT:
            return " "
        return f" {self.content} "


class PseudoClassToken(Token):
    """`:name(argument)`: calls a navigation function with an integer."""
    type = TokenType.PSEUDO_CLASS
    __slots__ = ("name", "argument")

    def __init__(self, name: str, argument: Optional[str] = None):
        self._init(name=name, argument=argument)

    def __str__(self) -> str:
        if self.argument is None:
            return f":{self.name}"
        return f":{self.name}({self.argument})"


class PseudoElementToken(Token):
    """`::name`: extracts a scalar property as the result."""
    type = TokenType.PSEUDO_ELEMENT
    __slots__ = ("name",)

    def __init__(self, name: str):
        self._init(name=name)

    def __str__(self) -> str:
        return f"::{self.name}"


def _quote(value: Optional[str]) -> str:
    text = "" if value is None else str(value)
    if _bare_value.match(text):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_selector(tokens) -> str:
    """
    Render a token sequence back to selector text.

    Args:
        tokens: Selector tokens

    Returns:
        Selector text that tokenizes to an equal sequence
    """
    return "".join(str(token) for token in tokens)
