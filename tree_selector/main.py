#!/usr/bin/env python3
"""
tree-selector - command-line entry point.

Runs a selector against one or more source files and prints the matches.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from cssselect import SelectorSyntaxError

from tree_selector import __version__
from tree_selector.errors import TreeSelectorError
from tree_selector.languages import language_for_path, parse_source
from tree_selector.selector import SelectorQuery, tokenize
from tree_selector.selector.nodes import get_scalar
from tree_selector.utils.config import Config
from tree_selector.utils.logging import PerformanceLogger, log_exception, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tree-selector",
        description="Query tree-sitter syntax trees with CSS-like selectors")

    parser.add_argument("selector", help="Selector, e.g. '.comment[text*=todo]::text'")
    parser.add_argument("files", nargs="+", help="Source files to query")
    parser.add_argument("-l", "--language", default=None,
                        help="Grammar to parse with (default: guessed from the file extension)")
    parser.add_argument("-f", "--format", choices=["text", "json"], default=None,
                        help="Output format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace selector matching")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument("--version", action="version", version=f"tree-selector {__version__}")

    return parser.parse_args(argv)


def _point(point: Any) -> str:
    row, column = point
    return f"{row + 1}:{column + 1}"


def describe_node(node: Any) -> Dict[str, Any]:
    """Serialize a node for JSON output."""
    return {
        "type": node.type,
        "start": list(node.start_point),
        "end": list(node.end_point),
        "text": get_scalar(node, "text"),
    }


def format_result(result: Any) -> str:
    """Render one query result as a line of text."""
    if isinstance(result, (str, int, float, bool)):
        return str(result)
    described = describe_node(result)
    return f"{described['type']} [{_point(result.start_point)}-{_point(result.end_point)}] {described['text']}"


def _jsonable(result: Any) -> Any:
    if isinstance(result, (str, int, float, bool)) or result is None:
        return result
    return describe_node(result)


def run(args: argparse.Namespace, config: Config) -> int:
    """
    Run the selector against every file.

    Returns:
        Process exit code
    """
    output_format = args.format or config.get("output.format", "text")
    verbose = args.verbose or bool(config.get("query.verbose", False))
    timer = PerformanceLogger(logger, "query")

    tokens = tokenize(args.selector)
    collected: Dict[str, List[Any]] = {}

    for path in args.files:
        language = (args.language or language_for_path(path)
                    or config.get("parsing.default_language", "javascript"))

        with open(path, "rb") as f:
            source = f.read()

        timer.start(path)
        tree = parse_source(source, language)
        results = SelectorQuery(tree, tokens, verbose=verbose).execute()
        timer.end(path)

        if output_format == "json":
            collected[path] = [_jsonable(result) for result in results]
        else:
            prefix = f"{path}: " if len(args.files) > 1 else ""
            for result in results:
                print(f"{prefix}{format_result(result)}")

    if output_format == "json":
        print(json.dumps(collected, indent=2))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line tool."""
    args = parse_args(argv)
    config = Config(args.config)

    console_level = config.get("logging.console_level", "WARNING")
    if args.debug or args.verbose:
        console_level = "DEBUG"
    setup_logging(log_file=config.get("logging.log_file"),
                  console_level=console_level,
                  file_level=config.get("logging.file_level", "DEBUG"))

    try:
        return run(args, config)
    except SelectorSyntaxError as e:
        logger.error(f"Invalid selector: {e}")
        return 1
    except TreeSelectorError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        log_exception(logger, e, "Could not read source file")
        return 1


if __name__ == "__main__":
    sys.exit(main())
