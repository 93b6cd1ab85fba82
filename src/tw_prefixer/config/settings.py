"""Resolved and user-facing prefixer configuration."""

from dataclasses import dataclass, field
from pathlib import Path
import re
from typing import Callable, FrozenSet, Iterable, Optional, Union

from ..core.classifier import Classifier
from ..exceptions import ConfigError

DEFAULT_ATTRIBUTES = ("className", "class", "tw")

# Characters that would break the literal being rewritten, or make a prefixed
# root split differently on the next pass.
_FORBIDDEN_PREFIX_CHARS = frozenset("\"'`\\:")

FilterSpec = Union[str, "re.Pattern[str]", Callable[[str], bool]]


def validate_prefix(prefix: str) -> str:
    """
    Check that ``prefix`` can be inserted into any class literal.

    Raises:
        ConfigError: If the prefix holds whitespace, quotes, a backslash,
            a backtick, a colon, or starts with the important marker.
    """
    if not isinstance(prefix, str):
        raise ConfigError(f"Prefix must be a string, got {type(prefix).__name__}")
    bad = sorted({ch for ch in prefix if ch.isspace() or ch in _FORBIDDEN_PREFIX_CHARS})
    if bad:
        raise ConfigError(f"Prefix {prefix!r} contains forbidden characters: {bad}")
    if prefix.startswith("!"):
        raise ConfigError(f"Prefix {prefix!r} must not start with '!'")
    return prefix


@dataclass(frozen=True)
class PrefixerConfig:
    """
    Configuration of one build cycle.

    Built once in ``PrefixerPlugin.build_start`` and passed read-only to every
    transform of that cycle.
    """

    prefix: str = ""
    attributes: FrozenSet[str] = frozenset(DEFAULT_ATTRIBUTES)
    classifier: Optional[Classifier] = None

    def __post_init__(self):
        validate_prefix(self.prefix)
        object.__setattr__(self, "attributes", frozenset(self.attributes))
        if not self.attributes:
            raise ConfigError("At least one target attribute name is required")
        if self.classifier is not None and not callable(self.classifier):
            raise ConfigError("Classifier override must be callable")

    @property
    def is_noop(self) -> bool:
        return not self.prefix


@dataclass
class PrefixerOptions:
    """
    User-supplied options, resolved into a ``PrefixerConfig`` at build start.

    Attributes:
        prefix_override: Prefix to use; when None the Tailwind config is read.
        tailwind_config: Path to the Tailwind config file; discovered under
            ``root`` when omitted.
        attributes: JSX attribute names to transform.
        include: Regex or predicate over file ids; default JS/TS/JSX/TSX.
        exclude: Regex or predicate over file ids; default ``node_modules``.
        classifier: Optional override predicate for utility detection.
        root: Project root used for config discovery.
    """

    prefix_override: Optional[str] = None
    tailwind_config: Optional[Path] = None
    attributes: Iterable[str] = DEFAULT_ATTRIBUTES
    include: Optional[FilterSpec] = None
    exclude: Optional[FilterSpec] = None
    classifier: Optional[Classifier] = None
    root: Path = field(default_factory=Path.cwd)
