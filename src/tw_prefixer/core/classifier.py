"""
@meta
name: token_classifier
type: utility
domain: core
responsibility:
  - Decide whether a class token is a rewritable utility class
  - Select between the default heuristic and a caller-supplied override
inputs:
  - Raw class tokens
outputs:
  - Boolean classification
tags:
  - core
  - classification
lifecycle:
  status: active
"""

"""Utility-class classification by lexical shape.

The default classifier is a heuristic over the token's shape: it never checks
the token against a real stylesheet. Uppercase letters mark a token as
non-utility (CSS-module references such as ``styles.Main`` or component
names), which also skips uppercase-bearing arbitrary values. A leading
important marker stays part of the root, so ``!bg-red-500`` is not recognized
by default; an override can accept such tokens and ``prefix_token`` then keeps
the marker in front.
"""

import re
from typing import Callable, Optional

from .variants import split_variants
from .vocabulary import is_known_root

Classifier = Callable[[str], bool]

IMPORTANT_MARKER = "!"
_UPPERCASE_RE = re.compile(r"[A-Z]")


def is_utility_token(token: str) -> bool:
    """
    Default classifier: does ``token`` look like a utility class?

    Args:
        token: Raw token, possibly with modifiers.

    Returns:
        True if the token's root is a known utility root or starts with one
        followed by a hyphen.

    Examples:
        >>> is_utility_token("hover:bg-red-500")
        True
        >>> is_utility_token("MyClass")
        False
        >>> is_utility_token("!bg-red-500")
        False
    """
    if not token or _UPPERCASE_RE.search(token):
        return False

    segments = split_variants(token)
    if not segments:
        return False
    root = segments[-1]
    if not root:
        return False

    return is_known_root(root) or is_known_root(root.split("-")[0])


def resolve_classifier(override: Optional[Classifier] = None) -> Classifier:
    """
    Pick the classifier for a build cycle.

    An override fully replaces the default heuristic and receives the raw
    token. It must be pure: it may be called any number of times per token.
    """
    return override if override is not None else is_utility_token
