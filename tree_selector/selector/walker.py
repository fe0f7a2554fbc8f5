"""
Selector walker.
This module matches a token sequence against tree nodes, one token at a time,
following combinators and navigation tokens to other nodes as needed.

A walk returns None when the branch fails, or a flat list of results when it
succeeds. A single matching node is a one-element list; the descendant
combinator concatenates the lists of all successful branches.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..errors import UnknownPropertyError
from .attributes import match_attribute
from .nodes import get_navigation, get_scalar, navigate, node_type
from .tokens import Combinator, Token, TokenType
from .traversal import descend_all, descend_immediate_children

logger = logging.getLogger(__name__)

MatchResult = Optional[List[Any]]


class SelectorWalker:
    """
    Recursive matcher for a token sequence.

    The walker holds no per-walk state, so one instance can walk any number
    of candidates.
    """

    def __init__(self, tokens: Sequence[Token], verbose: bool = False):
        """
        Initialize the walker.

        Args:
            tokens: The selector token sequence
            verbose: Whether to emit a trace line for every step
        """
        self.tokens = tokens
        self.verbose = verbose

    def _trace(self, message: str) -> None:
        if self.verbose:
            logger.debug(message)

    def walk(self, node: Any, index: int) -> MatchResult:
        """
        Match the tokens from ``index`` onwards against a node.

        Args:
            node: The current node
            index: Position of the next token to match

        Returns:
            List of results if the rest of the selector matches, None otherwise
        """
        if index >= len(self.tokens):
            self._trace(f"All {len(self.tokens)} tokens matched, returning {node_type(node)}")
            return [node]

        token = self.tokens[index]
        token_type = getattr(token, "type", None)
        self._trace(f"Walking token {index}: {token!r} on {node_type(node)}")

        try:
            if token_type is TokenType.CLASS:
                return self._walk_class(node, token, index)
            elif token_type is TokenType.ID:
                return self._walk_id(node, token, index)
            elif token_type is TokenType.ATTRIBUTE:
                return self._walk_attribute(node, token, index)
            elif token_type is TokenType.COMBINATOR:
                return self._walk_combinator(node, token, index)
            elif token_type is TokenType.PSEUDO_CLASS:
                return self._walk_pseudo_class(node, token, index)
            elif token_type is TokenType.PSEUDO_ELEMENT:
                return self._walk_pseudo_element(node, token, index)
        except UnknownPropertyError as e:
            logger.warning(f"{e}; aborting this branch")
            return None

        logger.warning(f"The token type {token_type!r} didn't match any known type; aborting this branch")
        return None

    def _walk_class(self, node: Any, token: Token, index: int) -> MatchResult:
        if node_type(node) != token.name:
            return None
        return self.walk(node, index + 1)

    def _walk_id(self, node: Any, token: Token, index: int) -> MatchResult:
        target = get_navigation(node, token.name)
        if target is None:
            return None
        return self.walk(target, index + 1)

    def _walk_attribute(self, node: Any, token: Token, index: int) -> MatchResult:
        value = get_scalar(node, token.name)
        if not match_attribute(value, token.operator, token.value, token.case_sensitivity):
            self._trace(f"Attribute {token.name} does not match")
            return None
        self._trace(f"Attribute {token.name} matches")
        return self.walk(node, index + 1)

    def _walk_combinator(self, node: Any, token: Token, index: int) -> MatchResult:
        next_index = index + 1
        content = token.content

        if content == Combinator.DESCENDANT:
            results: List[Any] = []
            descend_all(node, lambda candidate: self._collect(candidate, next_index, results))
            return results or None

        elif content == Combinator.CHILD:
            branches = descend_immediate_children(node, lambda child: self.walk(child, next_index))
            results = [result for branch in branches for result in branch]
            return results or None

        elif content == Combinator.NEXT_SIBLING:
            sibling = get_navigation(node, "nextNamedSibling")
            if sibling is None:
                return None
            return self.walk(sibling, next_index)

        elif content == Combinator.SUBSEQUENT_SIBLING:
            sibling = get_navigation(node, "previousNamedSibling")
            if sibling is None:
                return None
            return self.walk(sibling, next_index)

        logger.warning(f"Unsupported combinator: {content!r}")
        return None

    def _collect(self, node: Any, index: int, results: List[Any]) -> bool:
        matched = self.walk(node, index)
        if matched is None:
            return False
        results.extend(matched)
        return True

    def _walk_pseudo_class(self, node: Any, token: Token, index: int) -> MatchResult:
        try:
            argument = int(token.argument)
        except (TypeError, ValueError):
            logger.warning(f"Pseudo-class :{token.name} needs an integer argument, got {token.argument!r}")
            return None

        target = navigate(node, token.name, argument)
        if target is None:
            return None
        return self.walk(target, index + 1)

    def _walk_pseudo_element(self, node: Any, token: Token, index: int) -> MatchResult:
        value = get_scalar(node, token.name)
        if value is None:
            return None

        if index + 1 < len(self.tokens):
            self._trace(f"Pseudo-element ::{token.name} is followed by more tokens; "
                        f"a value cannot be matched further")
            return None

        return [value]
