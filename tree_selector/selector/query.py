"""
Selector query driver.
This module seeds candidate nodes from the leading class of a selector and
walks every candidate through the rest of the selector.
"""

import logging
from collections import deque
from typing import Any, List, Sequence, Union

from ..errors import ConfigurationError
from .nodes import node_type
from .tokenizer import tokenize
from .tokens import Token, TokenType, to_selector
from .traversal import descend_all
from .walker import SelectorWalker

logger = logging.getLogger(__name__)


def _root_of(tree: Any) -> Any:
    root = getattr(tree, "root_node", None)
    if root is not None:
        return root
    # Accept a node directly, e.g. to query a subtree
    if hasattr(tree, "type") and hasattr(tree, "child_count"):
        return tree
    return None


class SelectorQuery:
    """
    A selector bound to a tree.

    The selector is tokenized on construction; ``execute()`` can be called any
    number of times and keeps no state between calls.
    """

    def __init__(self, tree: Any, selector: Union[str, Sequence[Token]], verbose: bool = False):
        """
        Initialize the query.

        Args:
            tree: A tree-sitter Tree (or a node to use as the root)
            selector: Selector text or an already tokenized selector
            verbose: Whether to log trace lines while matching

        Raises:
            SelectorSyntaxError: If selector text cannot be tokenized
        """
        self.tree = tree
        if isinstance(selector, str):
            self.selector = selector
            self.selector_tokens = tokenize(selector)
        else:
            self.selector = to_selector(selector)
            self.selector_tokens = list(selector)
        self.verbose = verbose

    def _validate(self) -> Any:
        if not self.selector_tokens:
            raise ConfigurationError(f"Provided selector {self.selector!r} was unable to be parsed")

        root = _root_of(self.tree)
        if root is None:
            raise ConfigurationError(
                f"Invalid tree: expected a tree-sitter Tree or Node, got {type(self.tree).__name__}")

        if getattr(self.selector_tokens[0], "type", None) is not TokenType.CLASS:
            raise ConfigurationError(f"Provided selector {self.selector!r} must begin with a class")

        return root

    def execute(self) -> List[Any]:
        """
        Run the selector against the tree.

        Returns:
            Matching nodes, or extracted values when the selector ends with a
            pseudo-element, in discovery order

        Raises:
            ConfigurationError: If the selector or the tree cannot be queried
        """
        root = self._validate()
        first = self.selector_tokens[0]

        candidates = deque(descend_all(root, lambda node: node_type(node) == first.name))
        if self.verbose:
            logger.debug(f"Found {len(candidates)} candidates of type {first.name!r}")

        walker = SelectorWalker(self.selector_tokens, verbose=self.verbose)
        matches: List[Any] = []

        while candidates:
            candidate = candidates.popleft()
            result = walker.walk(candidate, 1)
            if result is None:
                continue
            if self.verbose:
                logger.debug(f"Candidate matched with {len(result)} results")
            matches.extend(result)

        logger.debug(f"Selector {self.selector!r} produced {len(matches)} matches")
        return matches


def execute(tree: Any, selector_tokens: Sequence[Token], verbose: bool = False) -> List[Any]:
    """
    Run a tokenized selector against a tree.

    Args:
        tree: A tree-sitter Tree (or a node to use as the root)
        selector_tokens: The selector token sequence
        verbose: Whether to log trace lines while matching

    Returns:
        Matching nodes or extracted values
    """
    return SelectorQuery(tree, list(selector_tokens), verbose=verbose).execute()


def select(tree: Any, selector: str, verbose: bool = False) -> List[Any]:
    """
    Tokenize selector text and run it against a tree.

    Args:
        tree: A tree-sitter Tree (or a node to use as the root)
        selector: Selector text, e.g. ``.comment[text*=todo]::text``
        verbose: Whether to log trace lines while matching

    Returns:
        Matching nodes or extracted values
    """
    return SelectorQuery(tree, selector, verbose=verbose).execute()
