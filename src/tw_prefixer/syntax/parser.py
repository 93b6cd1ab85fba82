"""
@meta
name: syntax_parser
type: utility
domain: syntax
responsibility:
  - Parse JS/TS/JSX/TSX source units with tree-sitter
  - Pick the grammar for a file path
  - Reject source units that do not parse cleanly
inputs:
  - Source text
outputs:
  - tree-sitter trees
tags:
  - syntax
  - parsing
lifecycle:
  status: active
"""

"""tree-sitter parsing for source units."""

from functools import lru_cache
from pathlib import PurePath
from typing import Iterator, Optional, Union

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from ..common.shared.logging_utils import get_logger
from ..exceptions import SourceParseError

logger = get_logger(__name__)

TSX = "tsx"
TYPESCRIPT = "typescript"
SUPPORTED_LANGUAGES = (TSX, TYPESCRIPT)

# .ts files may contain `<T>expr` casts that the TSX grammar rejects; every
# other JS flavour (including plain .js with JSX) goes through TSX.
_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}


@lru_cache(maxsize=None)
def get_language(name: str) -> Language:
    """Get (and cache) the tree-sitter language for ``name``."""
    if name == TSX:
        return Language(tree_sitter_typescript.language_tsx())
    if name == TYPESCRIPT:
        return Language(tree_sitter_typescript.language_typescript())
    raise ValueError(
        f"Unsupported language {name!r}; expected one of {SUPPORTED_LANGUAGES}"
    )


def language_for_path(path: Union[str, PurePath]) -> str:
    """Pick the grammar name for a file path (query strings are ignored)."""
    name = str(path).split("?", 1)[0]
    if PurePath(name).suffix.lower() in _TYPESCRIPT_SUFFIXES:
        return TYPESCRIPT
    return TSX


def _iter_error_nodes(node: Node) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            yield current
            continue
        if current.has_error:
            stack.extend(reversed(current.children))


def parse_source(
    source: bytes,
    language: str = TSX,
    file_id: Optional[str] = None,
) -> Tree:
    """
    Parse a source unit.

    A fresh parser is created per call so that concurrent transforms never
    share parser state.

    Args:
        source: UTF-8 encoded source text.
        language: Grammar name (``"tsx"`` or ``"typescript"``).
        file_id: Optional identifier used in error messages.

    Returns:
        The parsed tree.

    Raises:
        SourceParseError: If the tree contains syntax errors.
    """
    parser = Parser(get_language(language))
    tree = parser.parse(source)

    if tree.root_node.has_error:
        first = next(_iter_error_nodes(tree.root_node), tree.root_node)
        row, column = first.start_point
        kind = "missing token" if first.is_missing else "syntax error"
        logger.debug(f"Parse failed for {file_id or '<source>'}: {kind} at {row + 1}:{column + 1}")
        raise SourceParseError(
            f"Failed to parse source ({kind})",
            line=row + 1,
            column=column + 1,
            file_id=file_id,
        )
    return tree
