"""
@meta
name: syntax_transform
type: utility
domain: syntax
responsibility:
  - Rewrite class-bearing literals of one source unit
  - Produce rewritten code plus the edits applied
inputs:
  - Source text
  - PrefixerConfig for the current build cycle
outputs:
  - TransformResult
tags:
  - syntax
  - transform
lifecycle:
  status: active
"""

"""Per-source-unit transform: parse, select, rewrite, splice."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from tree_sitter import Tree

from ..common.shared.logging_utils import get_logger
from ..config.settings import PrefixerConfig
from ..core.rewriter import rewrite_class_string
from .literals import render_js_string, render_jsx_attribute
from .parser import TSX, parse_source
from .printer import SourceEdit, apply_edits, translate_offset
from .selector import RewriteTarget, TargetKind, iter_rewrite_targets

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransformResult:
    """Rewritten code of one source unit and the edits that produced it."""

    code: str
    edits: Tuple[SourceEdit, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.edits)

    def translate_offset(self, offset: int) -> int:
        """Map an original byte offset to the rewritten code."""
        return translate_offset(self.edits, offset)


def render_target(target: RewriteTarget, value: str) -> str:
    """Render the replacement source text for a rewritten target."""
    if target.kind is TargetKind.ATTRIBUTE_LITERAL:
        # JSX attribute strings have no escapes; the value never contains
        # its own delimiter.
        return f"{target.quote}{value}{target.quote}"
    if target.kind is TargetKind.STATIC_TEMPLATE_LITERAL:
        return render_jsx_attribute(value)
    return render_js_string(value, target.quote or '"')


def collect_edits(
    tree: Tree, source: bytes, config: PrefixerConfig
) -> List[SourceEdit]:
    """
    Build replacement instructions for every target whose text changes.

    Args:
        tree: Parsed source unit.
        source: Bytes the tree was parsed from.
        config: Resolved configuration of the current build cycle.

    Returns:
        Edits in document order.
    """
    edits: List[SourceEdit] = []
    for target in iter_rewrite_targets(tree.root_node, source, config.attributes):
        value = rewrite_class_string(target.value, config.prefix, config.classifier)
        replacement = render_target(target, value)
        node = target.node
        if replacement.encode("utf-8") == source[node.start_byte:node.end_byte]:
            continue
        edits.append(SourceEdit(node.start_byte, node.end_byte, replacement))
    return edits


def transform_source(
    code: str,
    config: PrefixerConfig,
    language: str = TSX,
    file_id: Optional[str] = None,
) -> TransformResult:
    """
    Rewrite the class strings of one source unit.

    Args:
        code: Source text.
        config: Resolved configuration of the current build cycle.
        language: Grammar name, see ``parser.language_for_path``.
        file_id: Optional identifier used in logs and errors.

    Returns:
        TransformResult; ``changed`` is False when nothing was rewritten.

    Raises:
        SourceParseError: If the source does not parse. No partial output.
    """
    source = code.encode("utf-8")
    tree = parse_source(source, language, file_id=file_id)

    if config.is_noop:
        return TransformResult(code=code)

    edits = collect_edits(tree, source, config)
    if not edits:
        return TransformResult(code=code)

    logger.debug(f"Rewrote {len(edits)} class literal(s) in {file_id or '<source>'}")
    output = apply_edits(source, edits).decode("utf-8")
    return TransformResult(code=output, edits=tuple(edits))
