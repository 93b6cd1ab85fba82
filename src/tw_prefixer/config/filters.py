"""Include/exclude filtering of file ids."""

import re
from typing import Callable, Optional

from ..exceptions import ConfigError
from .settings import FilterSpec

FileFilter = Callable[[str], bool]

DEFAULT_INCLUDE = re.compile(r"\.(jsx|tsx|js|ts)$", re.IGNORECASE)
DEFAULT_EXCLUDE = re.compile(r"node_modules")


def _as_predicate(spec: FilterSpec) -> FileFilter:
    if callable(spec):
        return spec
    if isinstance(spec, str):
        try:
            spec = re.compile(spec)
        except re.error as e:
            raise ConfigError(f"Invalid filter pattern {spec!r}: {e}") from e
    if isinstance(spec, re.Pattern):
        return lambda file_id: spec.search(file_id) is not None
    raise ConfigError(f"Unsupported filter type: {type(spec).__name__}")


def make_file_filter(
    include: Optional[FilterSpec] = None,
    exclude: Optional[FilterSpec] = None,
) -> FileFilter:
    """
    Build a predicate deciding whether a file id is transformed.

    Args:
        include: Regex (string or compiled) or predicate; default matches
            ``.js .jsx .ts .tsx`` case-insensitively.
        exclude: Regex or predicate; default matches ``node_modules``.

    Returns:
        Predicate that is True when the id is included and not excluded.
    """
    included = _as_predicate(include if include is not None else DEFAULT_INCLUDE)
    excluded = _as_predicate(exclude if exclude is not None else DEFAULT_EXCLUDE)

    def file_filter(file_id: str) -> bool:
        return bool(included(file_id)) and not excluded(file_id)

    return file_filter
