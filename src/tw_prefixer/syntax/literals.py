"""Decode and render string literal bodies.

JS string and template literal bodies are decoded ("cooked") before class
rewriting and re-escaped afterwards. JSX attribute strings carry no escape
sequences and are used verbatim.
"""

import re

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "f": "\f",
    "b": "\b",
    "0": "\0",
}

_ESCAPE_RE = re.compile(
    r"\\(?:"
    r"u\{(?P<brace>[0-9a-fA-F]+)\}"
    r"|u(?P<u4>[0-9a-fA-F]{4})"
    r"|x(?P<x2>[0-9a-fA-F]{2})"
    r"|(?P<newline>\r\n|[\n\r\u2028\u2029])"
    r"|(?P<char>[\s\S])"
    r")"
)

_RENDER_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\f": "\\f",
    "\b": "\\b",
    "\0": "\\x00",
}

_SURROGATE_PAIR_RE = re.compile(r"[\ud800-\udbff][\udc00-\udfff]")
_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")


def _decode_escape(match: "re.Match[str]") -> str:
    if match.group("brace") is not None:
        code_point = int(match.group("brace"), 16)
        if code_point > 0x10FFFF:
            return match.group(0)
        return chr(code_point)
    if match.group("u4") is not None:
        return chr(int(match.group("u4"), 16))
    if match.group("x2") is not None:
        return chr(int(match.group("x2"), 16))
    if match.group("newline") is not None:
        return ""
    char = match.group("char")
    return _SIMPLE_ESCAPES.get(char, char)


def _join_surrogates(match: "re.Match[str]") -> str:
    high, low = (ord(ch) for ch in match.group(0))
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def cook_js_string(raw: str) -> str:
    """
    Decode escape sequences in the body of a JS string or template literal.

    UTF-16 surrogate pairs written as two ``\\uXXXX`` escapes decode to one
    character. An unpaired surrogate is kept as a lone surrogate code point.

    Args:
        raw: Literal body as written in source, without the delimiters.

    Returns:
        The runtime string value.
    """
    if "\\" not in raw:
        return raw
    value = _ESCAPE_RE.sub(_decode_escape, raw)
    return _SURROGATE_PAIR_RE.sub(_join_surrogates, value)


def render_js_string(value: str, quote: str = '"') -> str:
    """Render ``value`` as a JS string literal delimited by ``quote``."""
    out = []
    for ch in value:
        if ch in _RENDER_ESCAPES:
            out.append(_RENDER_ESCAPES[ch])
        elif ch == quote:
            out.append("\\" + ch)
        elif _SURROGATE_RE.match(ch):
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return f"{quote}{''.join(out)}{quote}"


def render_jsx_attribute(value: str) -> str:
    """
    Render ``value`` as a JSX attribute value.

    Double quotes are preferred; single quotes are used when the value holds
    a double quote. An expression container holding a JS string is the
    fallback when both quote kinds appear, or when a lone surrogate needs an
    escape.
    """
    if not _SURROGATE_RE.search(value):
        if '"' not in value:
            return f'"{value}"'
        if "'" not in value:
            return f"'{value}'"
    return "{" + render_js_string(value) + "}"
