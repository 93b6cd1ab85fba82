"""Variant-aware splitting of utility-class tokens.

A token such as ``data-[state=open]:hover:[&>*]:bg-red-500`` is a chain of
modifier segments followed by the utility root. Colons nested inside square
brackets or quotes belong to their segment and are not split points.
"""

from typing import Iterable, List, Optional

VARIANT_SEPARATOR = ":"
_QUOTES = ("'", '"')


def split_variants(token: str) -> List[str]:
    """
    Split a token on top-level ``:`` separators.

    Bracket depth is a single counter for ``[``/``]`` (floored at 0). A quote
    span is closed by the same quote character unless the preceding character
    is a backslash. Unbalanced brackets or quotes never raise: the remainder
    of the token is treated as still being inside the open span.

    Args:
        token: Raw class token (without surrounding whitespace).

    Returns:
        Ordered list of segments; the last one is the utility root.

    Examples:
        >>> split_variants("md:hover:bg-red-500")
        ['md', 'hover', 'bg-red-500']
        >>> split_variants("[&:hover]:underline")
        ['[&:hover]', 'underline']
    """
    parts: List[str] = []
    buf: List[str] = []
    depth = 0
    quote: Optional[str] = None

    for i, ch in enumerate(token):
        if quote is not None:
            buf.append(ch)
            if ch == quote and (i == 0 or token[i - 1] != "\\"):
                quote = None
            continue

        if ch in _QUOTES:
            quote = ch
            buf.append(ch)
        elif ch == "[":
            depth += 1
            buf.append(ch)
        elif ch == "]":
            depth = max(0, depth - 1)
            buf.append(ch)
        elif ch == VARIANT_SEPARATOR and depth == 0:
            parts.append("".join(buf))
            buf = []
        else:
            buf.append(ch)

    if buf:
        parts.append("".join(buf))
    return parts


def join_variants(segments: Iterable[str]) -> str:
    """Rejoin segments produced by :func:`split_variants`."""
    return VARIANT_SEPARATOR.join(segments)
