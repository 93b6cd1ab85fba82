"""Rewrite whitespace-delimited class strings."""

from typing import Optional

from .classifier import Classifier, resolve_classifier
from .prefixer import prefix_token


def rewrite_class_string(
    value: str,
    prefix: str,
    classifier: Optional[Classifier] = None,
) -> str:
    """
    Prefix every utility token of a class string.

    Tokens are split on whitespace runs and rejoined with single spaces, so
    irregular whitespace is normalized. An empty prefix returns ``value``
    untouched.

    Args:
        value: Class-bearing string, e.g. ``"flex  items-center custom"``.
        prefix: Prefix to apply to utility tokens.
        classifier: Optional override for the default classifier.

    Returns:
        Rewritten class string.
    """
    if not prefix:
        return value

    is_utility = resolve_classifier(classifier)
    out = []
    for token in value.split():
        out.append(prefix_token(token, prefix) if is_utility(token) else token)
    return " ".join(out)
