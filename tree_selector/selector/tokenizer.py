"""
Selector tokenizer.
This module turns selector text into the typed token sequence consumed by the
selector walker. Lexing is done by cssselect; this module groups its lexemes
into class, id, attribute, combinator, pseudo-class and pseudo-element tokens.
"""

import logging
from typing import List, Optional

from cssselect import SelectorSyntaxError
from cssselect.parser import tokenize as css_tokenize

from .tokens import (
    ATTRIBUTE_OPERATORS, CASE_FLAGS, AttributeToken, ClassToken, Combinator,
    CombinatorToken, IdToken, PseudoClassToken, PseudoElementToken, Token,
)

logger = logging.getLogger(__name__)

COMBINATOR_DELIMS = (Combinator.CHILD, Combinator.NEXT_SIBLING, Combinator.SUBSEQUENT_SIBLING)
VALUE_TYPES = ("IDENT", "STRING", "NUMBER")


class SelectorTokenizer:
    """
    Groups cssselect lexemes into selector tokens.

    Whitespace between two compound selectors becomes a descendant combinator;
    whitespace next to an explicit combinator is dropped.
    """

    def __init__(self, selector: str):
        """
        Initialize the tokenizer.

        Args:
            selector: The selector text
        """
        self.selector = selector
        # cssselect raises SelectorSyntaxError here for unterminated strings
        self.lexemes = list(css_tokenize(selector))
        self.pos = 0

    def _peek(self, offset: int = 0):
        index = min(self.pos + offset, len(self.lexemes) - 1)
        return self.lexemes[index]

    def _next(self):
        lexeme = self._peek()
        if lexeme.type != "EOF":
            self.pos += 1
        return lexeme

    def _skip_whitespace(self) -> None:
        while self._peek().type == "S":
            self.pos += 1

    def _is_delim(self, lexeme, value: str) -> bool:
        return lexeme.type == "DELIM" and lexeme.value == value

    def _error(self, message: str, lexeme) -> SelectorSyntaxError:
        return SelectorSyntaxError(f"{message} at position {lexeme.pos} in {self.selector!r}")

    def _expect_ident(self, what: str) -> str:
        lexeme = self._next()
        if lexeme.type != "IDENT":
            raise self._error(f"Expected {what}, got {_describe(lexeme)}", lexeme)
        return lexeme.value

    def _read_combinator(self) -> Optional[str]:
        lexeme = self._peek()
        if lexeme.type != "DELIM":
            return None
        if lexeme.value in COMBINATOR_DELIMS:
            self._next()
            return lexeme.value
        if lexeme.value == "|" and self._is_delim(self._peek(1), "|"):
            # Column combinator, tokenized so the walker can reject it
            self._next()
            self._next()
            return "||"
        return None

    def _read_attribute(self) -> AttributeToken:
        self._next()  # [
        self._skip_whitespace()
        name = self._expect_ident("attribute name")
        self._skip_whitespace()

        lexeme = self._next()
        if self._is_delim(lexeme, "]"):
            return AttributeToken(name)

        if self._is_delim(lexeme, "="):
            operator = "="
        elif lexeme.type == "DELIM" and self._is_delim(self._peek(), "="):
            self._next()
            operator = lexeme.value + "="
        else:
            raise self._error(f"Expected attribute operator or ']', got {_describe(lexeme)}", lexeme)

        if operator not in ATTRIBUTE_OPERATORS:
            raise self._error(f"Unknown attribute operator {operator!r}", lexeme)

        self._skip_whitespace()
        lexeme = self._next()
        if lexeme.type not in VALUE_TYPES:
            raise self._error(f"Expected attribute value, got {_describe(lexeme)}", lexeme)
        value = lexeme.value
        self._skip_whitespace()

        case_sensitivity = None
        lexeme = self._peek()
        if lexeme.type == "IDENT":
            if lexeme.value not in CASE_FLAGS:
                raise self._error(f"Unknown case flag {lexeme.value!r}", lexeme)
            case_sensitivity = self._next().value
            self._skip_whitespace()

        lexeme = self._next()
        if not self._is_delim(lexeme, "]"):
            raise self._error(f"Expected ']', got {_describe(lexeme)}", lexeme)

        return AttributeToken(name, operator, value, case_sensitivity)

    def _read_pseudo(self) -> Token:
        self._next()  # :
        if self._is_delim(self._peek(), ":"):
            self._next()
            return PseudoElementToken(self._expect_ident("pseudo-element name"))

        name = self._expect_ident("pseudo-class name")
        if not self._is_delim(self._peek(), "("):
            return PseudoClassToken(name)

        self._next()  # (
        self._skip_whitespace()
        lexeme = self._next()
        if lexeme.type not in VALUE_TYPES:
            raise self._error(f"Expected argument for :{name}(), got {_describe(lexeme)}", lexeme)
        argument = lexeme.value
        self._skip_whitespace()
        lexeme = self._next()
        if not self._is_delim(lexeme, ")"):
            raise self._error(f"Expected ')', got {_describe(lexeme)}", lexeme)

        return PseudoClassToken(name, argument)

    def tokenize(self) -> List[Token]:
        """
        Produce the token sequence.

        Returns:
            List of selector tokens (empty for a blank selector)

        Raises:
            SelectorSyntaxError: If the selector is malformed
        """
        tokens: List[Token] = []
        pending_whitespace = False
        self._skip_whitespace()

        while self._peek().type != "EOF":
            lexeme = self._peek()

            if lexeme.type == "S":
                pending_whitespace = True
                self._skip_whitespace()
                continue

            combinator = self._read_combinator()
            if combinator is not None:
                if not tokens or isinstance(tokens[-1], CombinatorToken):
                    raise self._error(f"Unexpected combinator {combinator!r}", lexeme)
                tokens.append(CombinatorToken(combinator))
                pending_whitespace = False
                self._skip_whitespace()
                continue

            if pending_whitespace:
                tokens.append(CombinatorToken(Combinator.DESCENDANT))
                pending_whitespace = False

            if self._is_delim(lexeme, "."):
                self._next()
                tokens.append(ClassToken(self._expect_ident("class name")))
            elif lexeme.type == "HASH":
                self._next()
                tokens.append(IdToken(lexeme.value))
            elif self._is_delim(lexeme, "["):
                tokens.append(self._read_attribute())
            elif self._is_delim(lexeme, ":"):
                tokens.append(self._read_pseudo())
            else:
                raise self._error(f"Unexpected {_describe(lexeme)}", lexeme)

        if tokens and isinstance(tokens[-1], CombinatorToken):
            raise self._error("Selector ends with a combinator", self._peek())

        logger.debug(f"Tokenized {self.selector!r} into {len(tokens)} tokens")
        return tokens


def _describe(lexeme) -> str:
    if lexeme.type == "EOF":
        return "end of selector"
    return f"{lexeme.type} {lexeme.value!r}"


def tokenize(selector: str) -> List[Token]:
    """
    Tokenize selector text.

    Args:
        selector: The selector text, e.g. ``.comment[text*=todo]::text``

    Returns:
        List of selector tokens

    Raises:
        SelectorSyntaxError: If the selector is malformed
    """
    return SelectorTokenizer(selector).tokenize()
