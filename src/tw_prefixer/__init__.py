"""
Prefix Tailwind-style utility classes in JS/TS/JSX/TSX sources.

This package contains:
- Token rewrite engine (core/)
  - Variant splitting, classification, prefixing, class-string rewriting
- Syntax-tree rewriting (syntax/)
  - tree-sitter parsing, node selection, literal codec, splicing printer
- Configuration (config/)
  - Options, build-cycle config, Tailwind config discovery, file filters
- Build-cycle plugin (plugin.py), batch runner (batch.py), CLI (cli.py)
"""

from .config import PrefixerConfig, PrefixerOptions, make_file_filter, resolve_config
from .core import (
    is_utility_token,
    prefix_token,
    rewrite_class_string,
    split_variants,
)
from .exceptions import (
    BuildStateError,
    ConfigError,
    EditConflictError,
    PrefixerError,
    SourceParseError,
)
from .plugin import PrefixerPlugin
from .syntax import TransformResult, transform_source

__version__ = "0.1.0"

__all__ = [
    "BuildStateError",
    "ConfigError",
    "EditConflictError",
    "PrefixerConfig",
    "PrefixerError",
    "PrefixerOptions",
    "PrefixerPlugin",
    "SourceParseError",
    "TransformResult",
    "is_utility_token",
    "make_file_filter",
    "prefix_token",
    "resolve_config",
    "rewrite_class_string",
    "split_variants",
    "transform_source",
]
