"""
Selector engine.
This package matches CSS-like selectors against tree-sitter syntax trees.
"""

from .tokens import (
    Token, TokenType, Combinator, ClassToken, IdToken, AttributeToken,
    CombinatorToken, PseudoClassToken, PseudoElementToken, to_selector,
)
from .tokenizer import SelectorTokenizer, tokenize
from .walker import SelectorWalker
from .query import SelectorQuery, execute, select

__all__ = [
    'Token', 'TokenType', 'Combinator', 'ClassToken', 'IdToken', 'AttributeToken',
    'CombinatorToken', 'PseudoClassToken', 'PseudoElementToken', 'to_selector',
    'SelectorTokenizer', 'tokenize', 'SelectorWalker', 'SelectorQuery', 'execute', 'select',
]
