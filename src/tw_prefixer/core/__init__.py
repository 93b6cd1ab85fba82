"""Token-level rewrite engine (no syntax-tree dependencies)."""

from .variants import (
    VARIANT_SEPARATOR,
    join_variants,
    split_variants,
)
from .vocabulary import (
    UTILITY_ROOTS,
    is_known_root,
    roots_with_prefix,
)
from .classifier import (
    Classifier,
    is_utility_token,
    resolve_classifier,
)
from .prefixer import prefix_token
from .rewriter import rewrite_class_string

__all__ = [
    # Variants
    "VARIANT_SEPARATOR",
    "join_variants",
    "split_variants",
    # Vocabulary
    "UTILITY_ROOTS",
    "is_known_root",
    "roots_with_prefix",
    # Classification
    "Classifier",
    "is_utility_token",
    "resolve_classifier",
    # Prefixing
    "prefix_token",
    "rewrite_class_string",
]
