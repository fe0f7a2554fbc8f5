"""
Attribute selector matching.
"""

import logging
import re
from typing import Any, Optional, Union

from .tokens import ATTRIBUTE_OPERATORS

logger = logging.getLogger(__name__)

_leading_integer = re.compile(r"\s*([+-]?\d+)")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_int(literal: Any) -> Optional[int]:
    # Leading-integer parse: "12px" -> 12, "x" -> None
    match = _leading_integer.match(str(literal))
    if not match:
        return None
    return int(match.group(1))


def _normalize(value: Union[str, int, float], literal: Any,
               case_sensitivity: Optional[str]):
    if case_sensitivity in ("s", "S"):
        return value, literal

    # No flag behaves like the `i` flag
    if isinstance(value, str):
        return value.lower(), str(literal).lower()
    return value, _parse_int(literal)


def match_attribute(value: Any, operator: Optional[str], literal: Any = None,
                    case_sensitivity: Optional[str] = None) -> bool:
    """
    Check a property value against an attribute selector.

    Args:
        value: The property value read from the node
        operator: One of ``=``, ``~=``, ``|=``, ``^=``, ``$=``, ``*=``, or None
            for an existence test
        literal: The value written in the selector
        case_sensitivity: ``i``/``I`` or None for case-insensitive comparison,
            ``s``/``S`` for case-sensitive comparison

    Returns:
        True if the value satisfies the selector
    """
    if operator is None:
        return bool(value)

    if operator not in ATTRIBUTE_OPERATORS:
        logger.warning(f"Unrecognized attribute operator: {operator}")
        return False

    if not isinstance(value, str) and not _is_number(value):
        return False

    value, literal = _normalize(value, literal, case_sensitivity)
    if literal is None:
        return False

    if operator == "=":
        if _is_number(value) and _is_number(literal):
            return value == literal
        return str(value) == str(literal)

    # The remaining operators work on text
    value = str(value)
    literal = str(literal)

    if operator == "~=":
        return literal in value.split(" ")
    elif operator == "|=":
        return value == literal or value.split("-")[0] == literal
    elif operator == "^=":
        return value.startswith(literal)
    elif operator == "$=":
        return value.endswith(literal)
    return literal in value
