"""Apply a prefix to the root segment of a single class token."""

from .classifier import IMPORTANT_MARKER
from .variants import join_variants, split_variants


def prefix_token(token: str, prefix: str) -> str:
    """
    Prefix the utility root of ``token``, keeping modifiers in place.

    A leading important marker is moved outside the prefix
    (``!bg-red-500`` -> ``!tw-bg-red-500``). A root that already starts with
    the prefix is left alone, so applying the same prefix twice is a no-op.

    Args:
        token: Class token, e.g. ``md:hover:bg-red-500``.
        prefix: Prefix to apply; empty means no change.

    Returns:
        The prefixed token.
    """
    if not prefix:
        return token

    important = ""
    if token.startswith(IMPORTANT_MARKER):
        important = IMPORTANT_MARKER
        token = token[len(IMPORTANT_MARKER):]
    if not token:
        return important

    segments = split_variants(token)
    root = segments.pop() if segments else ""

    if root.startswith(prefix):
        return important + join_variants([*segments, root])

    return important + join_variants([*segments, prefix + root])
