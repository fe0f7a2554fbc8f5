"""
tree_selector - CSS-like selectors for tree-sitter syntax trees.
"""

from cssselect import SelectorSyntaxError

from tree_selector.errors import (
    TreeSelectorError, ConfigurationError, UnknownPropertyError, GrammarNotFoundError,
)
from tree_selector.selector import SelectorQuery, execute, select, tokenize

# Package information
__version__ = "1.0.0"
__author__ = "tree-selector developers"
__description__ = "CSS-like selectors for tree-sitter syntax trees"

__all__ = [
    'SelectorQuery',
    'execute',
    'select',
    'tokenize',
    'TreeSelectorError',
    'ConfigurationError',
    'UnknownPropertyError',
    'GrammarNotFoundError',
    'SelectorSyntaxError',
]
