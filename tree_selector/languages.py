"""
Tree-sitter grammar loading.
This module builds parsers for languages whose grammar is installed as a
``tree_sitter_<language>`` package and parses source code into trees that
selectors can be run against.
"""

import importlib
import logging
import os
import threading
from typing import Dict, Optional, Tuple, Union

import tree_sitter

from tree_selector.errors import GrammarNotFoundError

logger = logging.getLogger(__name__)

# Languages shipped inside another grammar package: name -> (module, factory)
GRAMMAR_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
    "php": ("tree_sitter_php", "language_php"),
    "xml": ("tree_sitter_xml", "language_xml"),
}

EXTENSION_LANGUAGES: Dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".py": "python",
    ".json": "json",
    ".go": "go",
    ".rs": "rust",
    ".rb": "ruby",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".css": "css",
    ".html": "html",
    ".php": "php",
    ".sh": "bash",
}

_language_cache: Dict[str, tree_sitter.Language] = {}
_cache_lock = threading.Lock()


def _language_key(name: str) -> str:
    return name.lower().replace("-", "_")


def _grammar_location(name: str) -> Tuple[str, str]:
    key = _language_key(name)
    if key in GRAMMAR_OVERRIDES:
        return GRAMMAR_OVERRIDES[key]
    return f"tree_sitter_{key}", "language"


def load_language(name: str) -> tree_sitter.Language:
    """
    Load the tree-sitter language for a name such as ``javascript``.

    Args:
        name: Language name

    Returns:
        tree_sitter.Language: The loaded language

    Raises:
        GrammarNotFoundError: If no grammar package is installed for the name
    """
    key = _language_key(name)
    with _cache_lock:
        if key in _language_cache:
            return _language_cache[key]

    module_name, factory_name = _grammar_location(name)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GrammarNotFoundError(
            f"No tree-sitter grammar for {name!r}: install the {module_name.replace('_', '-')} package"
        ) from e

    factory = getattr(module, factory_name, None)
    if factory is None:
        raise GrammarNotFoundError(f"Module {module_name} has no {factory_name}() function")

    language = tree_sitter.Language(factory())
    logger.debug(f"Loaded tree-sitter grammar {module_name}.{factory_name}")

    with _cache_lock:
        _language_cache[key] = language
    return language


def get_parser(name: str) -> tree_sitter.Parser:
    """
    Create a parser for a language.

    Args:
        name: Language name

    Returns:
        tree_sitter.Parser: Parser with the language set
    """
    return tree_sitter.Parser(load_language(name))


def parse_source(source: Union[str, bytes], language: str) -> tree_sitter.Tree:
    """
    Parse source code.

    Args:
        source: Source code as text or UTF-8 bytes
        language: Language name

    Returns:
        tree_sitter.Tree: The syntax tree
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    return get_parser(language).parse(source)


def language_for_path(path: str) -> Optional[str]:
    """
    Guess the language of a source file from its extension.

    Args:
        path: File path

    Returns:
        Language name, or None if the extension is unknown
    """
    _, extension = os.path.splitext(path)
    return EXTENSION_LANGUAGES.get(extension.lower())
