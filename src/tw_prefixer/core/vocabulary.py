"""Registry of known utility roots used by the default classifier."""

from typing import FrozenSet, Iterable

# Known utility roots, grouped by family. A root matches either a whole
# utility ("flex") or the first hyphen component of one ("bg" in "bg-red-500").
UTILITY_ROOTS: FrozenSet[str] = frozenset(
    {
        # Layout / display / position
        "container",
        "sr-only",
        "not-sr-only",
        "static",
        "fixed",
        "absolute",
        "relative",
        "sticky",
        "block",
        "inline",
        "inline-block",
        "inline-flex",
        "flex",
        "grid",
        "table",
        "contents",
        "hidden",
        # Spacing / sizing
        "m",
        "mx",
        "my",
        "mt",
        "mr",
        "mb",
        "ml",
        "p",
        "px",
        "py",
        "pt",
        "pr",
        "pb",
        "pl",
        "space-x",
        "space-y",
        "w",
        "h",
        "min-w",
        "min-h",
        "max-w",
        "max-h",
        "size",
        "inset",
        "top",
        "right",
        "bottom",
        "left",
        # Typography
        "font",
        "text",
        "antialiased",
        "subpixel-antialiased",
        "tracking",
        "leading",
        "list",
        "placeholder",
        # Backgrounds / borders / effects
        "bg",
        "from",
        "via",
        "to",
        "border",
        "rounded",
        "shadow",
        "ring",
        "outline",
        "opacity",
        "decoration",
        # Flexbox / grid
        "flex-grow",
        "grow",
        "flex-shrink",
        "shrink",
        "basis",
        "order",
        "grid-cols",
        "grid-rows",
        "col",
        "row",
        "gap",
        "place",
        "items",
        "justify",
        "content",
        "self",
        "auto-cols",
        "auto-rows",
        # Transforms / transitions
        "transform",
        "scale",
        "rotate",
        "translate",
        "skew",
        "origin",
        "transition",
        "duration",
        "ease",
        "delay",
        # Interactivity
        "cursor",
        "select",
        "resize",
        "scroll",
        "snap",
        "touch",
        "pointer-events",
        "accent",
        "appearance",
        # SVG / filters
        "fill",
        "stroke",
        "stroke-w",
        "filter",
        "backdrop",
        # Misc
        "z",
        "overflow",
        "object",
        "align",
        "whitespace",
        "break",
        "isolate",
        "isolation",
    }
)


def is_known_root(name: str) -> bool:
    """Check if a name is a registered utility root."""
    return name in UTILITY_ROOTS


def roots_with_prefix(prefix: str) -> Iterable[str]:
    """Get all registered roots starting with ``prefix`` (sorted)."""
    return sorted(root for root in UTILITY_ROOTS if root.startswith(prefix))
