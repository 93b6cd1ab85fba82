"""Syntax-tree side of the rewrite: parsing, node selection, splicing."""

from .literals import (
    cook_js_string,
    render_js_string,
    render_jsx_attribute,
)
from .parser import (
    SUPPORTED_LANGUAGES,
    TSX,
    TYPESCRIPT,
    language_for_path,
    parse_source,
)
from .printer import (
    SourceEdit,
    apply_edits,
    translate_offset,
)
from .selector import (
    CLASS_HELPERS,
    RewriteTarget,
    TargetKind,
    iter_rewrite_targets,
)
from .transform import (
    TransformResult,
    collect_edits,
    transform_source,
)

__all__ = [
    # Literals
    "cook_js_string",
    "render_js_string",
    "render_jsx_attribute",
    # Parsing
    "SUPPORTED_LANGUAGES",
    "TSX",
    "TYPESCRIPT",
    "language_for_path",
    "parse_source",
    # Printing
    "SourceEdit",
    "apply_edits",
    "translate_offset",
    # Selection
    "CLASS_HELPERS",
    "RewriteTarget",
    "TargetKind",
    "iter_rewrite_targets",
    # Transform
    "TransformResult",
    "collect_edits",
    "transform_source",
]
