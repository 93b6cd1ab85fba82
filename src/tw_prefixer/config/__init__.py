"""Configuration: options, build-cycle config, file filters."""

from .settings import (
    DEFAULT_ATTRIBUTES,
    PrefixerConfig,
    PrefixerOptions,
    validate_prefix,
)
from .filters import (
    DEFAULT_EXCLUDE,
    DEFAULT_INCLUDE,
    FileFilter,
    make_file_filter,
)
from .loader import (
    OPTIONS_FILE_NAME,
    TAILWIND_CONFIG_NAMES,
    discover_tailwind_config,
    import_classifier,
    load_options_file,
    options_from_dict,
    read_tailwind_prefix,
    resolve_config,
    resolve_prefix,
)

__all__ = [
    # Settings
    "DEFAULT_ATTRIBUTES",
    "PrefixerConfig",
    "PrefixerOptions",
    "validate_prefix",
    # Filters
    "DEFAULT_EXCLUDE",
    "DEFAULT_INCLUDE",
    "FileFilter",
    "make_file_filter",
    # Loading
    "OPTIONS_FILE_NAME",
    "TAILWIND_CONFIG_NAMES",
    "discover_tailwind_config",
    "import_classifier",
    "load_options_file",
    "options_from_dict",
    "read_tailwind_prefix",
    "resolve_config",
    "resolve_prefix",
]
