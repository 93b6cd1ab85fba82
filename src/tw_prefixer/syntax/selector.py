"""
@meta
name: node_selector
type: utility
domain: syntax
responsibility:
  - Find class-bearing literals in a parsed source unit
  - Skip dynamic content that cannot be rewritten statically
inputs:
  - tree-sitter trees
  - Target attribute names
outputs:
  - RewriteTarget instances
tags:
  - syntax
  - selection
lifecycle:
  status: active
"""

"""Selection of rewritable class-bearing locations in a syntax tree.

Eligible locations, all inside a JSX attribute whose name is targeted:

- ``className="..."``
- ``className={`...`}`` with no ``${}`` substitutions
- string / static template / ``cond && "..."`` arguments of a class-list
  helper call such as ``className={clsx(...)}``
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterator, Optional

from tree_sitter import Node

from .literals import cook_js_string

# Callees treated as pure string-joining helpers. Only bare identifiers match:
# `utils.clsx(...)` or an aliased import is not recognized.
CLASS_HELPERS = frozenset({"clsx", "classnames"})


class TargetKind(str, Enum):
    """Shape of a rewritable location."""

    ATTRIBUTE_LITERAL = "attribute-literal"
    STATIC_TEMPLATE_LITERAL = "static-template-literal"
    CALL_ARGUMENT_LITERAL = "call-argument-literal"
    CALL_ARGUMENT_TEMPLATE = "call-argument-template"
    CALL_ARGUMENT_LOGICAL_RIGHT = "call-argument-logical-right"


@dataclass(frozen=True)
class RewriteTarget:
    """
    A class-bearing location found during one traversal.

    ``node`` is the node whose byte range gets replaced; ``value`` is the
    literal's string value. ``quote`` is the delimiter to keep when the
    replacement is rendered, or None when a template literal becomes a plain
    string.
    """

    kind: TargetKind
    node: Node
    value: str
    quote: Optional[str] = None


def node_text(node: Node, source: bytes) -> str:
    """Decode the source slice covered by ``node``."""
    return source[node.start_byte:node.end_byte].decode("utf-8")


def is_static_template(node: Node) -> bool:
    """Check that a template literal has no ``${}`` substitutions."""
    return node.type == "template_string" and not any(
        child.type == "template_substitution" for child in node.children
    )


def _literal_body(node: Node, source: bytes) -> str:
    return node_text(node, source)[1:-1]


def _significant_children(node: Node):
    return [child for child in node.named_children if child.type != "comment"]


def _literal_target(
    kind: TargetKind, node: Node, source: bytes
) -> Optional[RewriteTarget]:
    """Target for a JS string or static template literal, or None."""
    if node.type == "string":
        text = node_text(node, source)
        return RewriteTarget(kind, node, cook_js_string(text[1:-1]), quote=text[0])
    if is_static_template(node):
        return RewriteTarget(kind, node, cook_js_string(_literal_body(node, source)))
    return None


def _helper_call_targets(call: Node, source: bytes) -> Iterator[RewriteTarget]:
    callee = call.child_by_field_name("function")
    if callee is None or callee.type != "identifier":
        return
    if node_text(callee, source) not in CLASS_HELPERS:
        return

    arguments = call.child_by_field_name("arguments")
    # A tagged template (clsx`...`) has a template_string here instead.
    if arguments is None or arguments.type != "arguments":
        return

    for arg in _significant_children(arguments):
        target: Optional[RewriteTarget] = None
        if arg.type == "string":
            target = _literal_target(TargetKind.CALL_ARGUMENT_LITERAL, arg, source)
        elif arg.type == "template_string":
            target = _literal_target(TargetKind.CALL_ARGUMENT_TEMPLATE, arg, source)
        elif arg.type == "binary_expression":
            operator = arg.child_by_field_name("operator")
            right = arg.child_by_field_name("right")
            if operator is not None and operator.type == "&&" and right is not None:
                target = _literal_target(
                    TargetKind.CALL_ARGUMENT_LOGICAL_RIGHT, right, source
                )
        if target is not None:
            yield target


def _attribute_targets(
    attribute: Node, source: bytes, attributes: AbstractSet[str]
) -> Iterator[RewriteTarget]:
    children = _significant_children(attribute)
    if len(children) < 2:
        return
    name, value = children[0], children[1]
    if node_text(name, source) not in attributes:
        return

    if value.type == "string":
        text = node_text(value, source)
        yield RewriteTarget(
            TargetKind.ATTRIBUTE_LITERAL, value, text[1:-1], quote=text[0]
        )
        return

    if value.type != "jsx_expression":
        return
    inner = _significant_children(value)
    if len(inner) != 1:
        return
    expression = inner[0]

    if expression.type == "template_string":
        if is_static_template(expression):
            # The whole `{...}` container is replaced by a plain string.
            yield RewriteTarget(
                TargetKind.STATIC_TEMPLATE_LITERAL,
                value,
                cook_js_string(_literal_body(expression, source)),
            )
    elif expression.type == "call_expression":
        yield from _helper_call_targets(expression, source)


def iter_rewrite_targets(
    root: Node, source: bytes, attributes: AbstractSet[str]
) -> Iterator[RewriteTarget]:
    """
    Walk a tree once, in document order, yielding rewritable locations.

    Args:
        root: Root node of the parsed source unit.
        source: The bytes the tree was parsed from.
        attributes: Attribute names to target (e.g. ``className``).

    Yields:
        RewriteTarget for every eligible literal.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "jsx_attribute":
            yield from _attribute_targets(node, source, attributes)
        stack.extend(reversed(node.children))
