"""Build-cycle lifecycle around the per-file transform.

A host calls ``build_start()`` once per build (or rebuild), then
``transform(code, file_id)`` for each source unit, possibly from several
worker threads. The config resolved at build start is the only shared state
and is read-only until the next ``build_start()``.
"""

from typing import Optional

from .common.shared.logging_utils import get_logger
from .config.filters import make_file_filter
from .config.loader import resolve_config
from .config.settings import PrefixerConfig, PrefixerOptions
from .exceptions import BuildStateError
from .syntax.parser import language_for_path
from .syntax.transform import TransformResult, transform_source

logger = get_logger(__name__)


class PrefixerPlugin:
    """Prefixes utility classes in JS/TS/JSX/TSX files of a build."""

    name = "tw-prefixer"

    def __init__(self, options: Optional[PrefixerOptions] = None):
        self.options = options or PrefixerOptions()
        self.file_filter = make_file_filter(self.options.include, self.options.exclude)
        self._config: Optional[PrefixerConfig] = None

    @property
    def config(self) -> PrefixerConfig:
        """Config of the current build cycle."""
        if self._config is None:
            raise BuildStateError("build_start() must be called before transforms")
        return self._config

    def build_start(self) -> PrefixerConfig:
        """Resolve the config for a new build cycle, replacing the previous one."""
        self._config = resolve_config(self.options)
        logger.info(
            f"Build started with prefix {self._config.prefix!r} for attributes "
            f"{sorted(self._config.attributes)}"
        )
        return self._config

    def transform(self, code: str, file_id: str) -> Optional[TransformResult]:
        """
        Transform one source unit.

        Args:
            code: Source text.
            file_id: Path or module id of the source unit.

        Returns:
            None when the file is filtered out, otherwise the TransformResult.

        Raises:
            BuildStateError: If no build cycle has been started.
            SourceParseError: If the file does not parse.
        """
        config = self.config
        if not self.file_filter(file_id):
            return None
        return transform_source(
            code,
            config,
            language=language_for_path(file_id),
            file_id=file_id,
        )
