"""
Exception types raised by the selector engine.
"""


class TreeSelectorError(Exception):
    """Base class for all errors raised by tree_selector."""


class ConfigurationError(TreeSelectorError, ValueError):
    """
    Raised when a query cannot start.

    Covers an empty token sequence, a tree without an accessible root node
    and a selector that does not begin with a class.
    """


class UnknownPropertyError(TreeSelectorError, KeyError):
    """
    Raised when a selector names a node property or navigation function
    outside the supported accessor maps.

    The walker converts this into a branch failure.
    """

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind}: {name!r}")

    def __str__(self) -> str:
        return f"Unknown {self.kind}: {self.name!r}"


class GrammarNotFoundError(TreeSelectorError, ImportError):
    """Raised when no tree-sitter grammar package is installed for a language."""
