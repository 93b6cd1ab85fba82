"""
@meta
name: config_loader
type: utility
domain: config
responsibility:
  - Load prefixer options from YAML
  - Discover the Tailwind config file and read its prefix
  - Resolve options into the read-only config of a build cycle
inputs:
  - tw-prefixer.yaml options files
  - tailwind.config.{ts,js,cjs,mjs}
outputs:
  - PrefixerOptions
  - PrefixerConfig
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""

import importlib
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..common.shared.logging_utils import get_logger
from ..common.shared.yaml_utils import load_yaml
from ..core.classifier import Classifier
from ..exceptions import ConfigError
from .settings import DEFAULT_ATTRIBUTES, PrefixerConfig, PrefixerOptions

logger = get_logger(__name__)

OPTIONS_FILE_NAME = "tw-prefixer.yaml"
TAILWIND_CONFIG_NAMES = (
    "tailwind.config.ts",
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
)

# Top-level `prefix: 'tw-'` entry of a Tailwind config (any quote style).
_TAILWIND_PREFIX_RE = re.compile(
    r"""(?m)^\s*["']?prefix["']?\s*:\s*(["'`])(?P<prefix>[^"'`\n]*)\1"""
)

_OPTION_KEYS = {
    "prefix",
    "tailwind_config",
    "attributes",
    "include",
    "exclude",
    "classifier",
}


def discover_tailwind_config(root: Path) -> Optional[Path]:
    """Find the first conventional Tailwind config file under ``root``."""
    for name in TAILWIND_CONFIG_NAMES:
        candidate = Path(root) / name
        if candidate.is_file():
            return candidate
    return None


def read_tailwind_prefix(config_path: Path) -> Optional[str]:
    """
    Read the ``prefix`` entry from a Tailwind config file.

    The file is scanned textually; it is never executed. Only a literal string
    value is recognized.

    Returns:
        The prefix, or None when the file sets no literal prefix.

    Raises:
        ConfigError: If the file cannot be read.
    """
    try:
        text = Path(config_path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read Tailwind config {config_path}: {e}") from e
    match = _TAILWIND_PREFIX_RE.search(text)
    return match.group("prefix") if match else None


def import_classifier(spec: str) -> Classifier:
    """
    Import a classifier override from a ``"package.module:function"`` path.

    Raises:
        ConfigError: If the path is malformed, cannot be imported, or does not
            name a callable.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(
            f"Classifier must be given as 'module:function', got {spec!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import classifier module {module_name!r}: {e}") from e
    classifier = getattr(module, attr, None)
    if not callable(classifier):
        raise ConfigError(f"Classifier {spec!r} is not a callable")
    return classifier


def options_from_dict(raw: Dict[str, Any], base_dir: Path) -> PrefixerOptions:
    """
    Build options from a parsed options mapping.

    Relative ``tailwind_config`` paths are resolved against ``base_dir``.
    """
    unknown = set(raw) - _OPTION_KEYS
    if unknown:
        raise ConfigError(f"Unknown option(s): {sorted(unknown)}")

    attributes = raw.get("attributes") or DEFAULT_ATTRIBUTES
    if not isinstance(attributes, (list, tuple)) or not all(
        isinstance(a, str) for a in attributes
    ):
        raise ConfigError("'attributes' must be a list of attribute names")

    tailwind_config = raw.get("tailwind_config")
    if tailwind_config is not None and not isinstance(tailwind_config, str):
        raise ConfigError("'tailwind_config' must be a path string")
    classifier = raw.get("classifier")
    if classifier is not None and not isinstance(classifier, str):
        raise ConfigError("'classifier' must be a 'module:function' string")
    prefix = raw.get("prefix")
    if prefix is not None and not isinstance(prefix, str):
        raise ConfigError("'prefix' must be a string")

    return PrefixerOptions(
        prefix_override=prefix,
        tailwind_config=base_dir / tailwind_config if tailwind_config else None,
        attributes=tuple(attributes),
        include=raw.get("include"),
        exclude=raw.get("exclude"),
        classifier=import_classifier(classifier) if classifier else None,
        root=base_dir,
    )


def load_options_file(path: Path) -> PrefixerOptions:
    """
    Load options from a YAML file such as ``tw-prefixer.yaml``.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or holds
            invalid options.
    """
    path = Path(path)
    try:
        raw = load_yaml(path)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Options file {path} must contain a mapping")
    return options_from_dict(raw, path.parent)


def resolve_prefix(options: PrefixerOptions) -> str:
    """
    Resolve the prefix for a build cycle.

    Order: explicit override, then the Tailwind config (given or discovered),
    then the empty prefix (no-op).
    """
    if options.prefix_override is not None:
        return options.prefix_override

    config_path = options.tailwind_config or discover_tailwind_config(options.root)
    if config_path is None:
        logger.debug("No Tailwind config found; using empty prefix")
        return ""

    prefix = read_tailwind_prefix(config_path)
    if prefix is None:
        logger.debug(f"No literal prefix in {config_path}; using empty prefix")
        return ""
    logger.debug(f"Read prefix {prefix!r} from {config_path}")
    return prefix


def resolve_config(options: PrefixerOptions) -> PrefixerConfig:
    """Resolve user options into the read-only config of a build cycle."""
    return PrefixerConfig(
        prefix=resolve_prefix(options),
        attributes=frozenset(options.attributes),
        classifier=options.classifier,
    )
