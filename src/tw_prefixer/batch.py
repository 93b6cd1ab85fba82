"""
@meta
name: batch_transform
type: utility
domain: batch
responsibility:
  - Collect source files under the given paths
  - Transform files concurrently, one failure per file at most
  - Write rewritten files back
inputs:
  - File and directory paths
  - A started PrefixerPlugin
outputs:
  - FileOutcome per file
tags:
  - batch
  - concurrency
lifecycle:
  status: active
"""

"""Concurrent transform of many files within one build cycle."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .common.shared.logging_utils import get_logger
from .config.filters import FileFilter
from .plugin import PrefixerPlugin

logger = get_logger(__name__)

DEFAULT_WORKERS = 4
# Below this many files the pool overhead outweighs any gain.
MIN_PARALLEL_FILES = 3


@dataclass
class FileOutcome:
    """Result of transforming one file."""

    path: Path
    changed: bool = False
    edits: int = 0
    code: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def iter_source_files(paths: Iterable[Path], file_filter: FileFilter) -> List[Path]:
    """
    Expand files and directories into the sorted list of files to transform.

    Explicitly named files are subject to the filter as well.
    """
    found = set()
    for path in paths:
        path = Path(path)
        candidates = path.rglob("*") if path.is_dir() else [path]
        for candidate in candidates:
            if candidate.is_file() and file_filter(candidate.as_posix()):
                found.add(candidate)
    return sorted(found)


def _transform_file(plugin: PrefixerPlugin, path: Path, write: bool) -> FileOutcome:
    code = path.read_text(encoding="utf-8")
    result = plugin.transform(code, path.as_posix())
    if result is None or not result.changed:
        return FileOutcome(path=path)

    if write:
        path.write_text(result.code, encoding="utf-8")
        logger.debug(f"Wrote {path} ({len(result.edits)} edit(s))")
    return FileOutcome(
        path=path,
        changed=True,
        edits=len(result.edits),
        code=result.code,
    )


def transform_files(
    plugin: PrefixerPlugin,
    files: List[Path],
    workers: int = DEFAULT_WORKERS,
    write: bool = True,
) -> List[FileOutcome]:
    """
    Transform files with a started plugin.

    A failing file (unreadable, unparsable, faulty classifier override) is
    logged and reported in its outcome; other files are unaffected.

    Args:
        plugin: Plugin whose ``build_start()`` has already run.
        files: Files to transform.
        workers: Maximum worker threads.
        write: Write changed files back to disk.

    Returns:
        One FileOutcome per file, in input order.
    """
    # Raises BuildStateError before any file is touched.
    prefix = plugin.config.prefix
    logger.debug(f"Transforming {len(files)} file(s) with prefix {prefix!r}")

    use_parallel = workers > 1 and len(files) >= MIN_PARALLEL_FILES
    outcomes: List[Optional[FileOutcome]] = [None] * len(files)

    if use_parallel:
        with ThreadPoolExecutor(max_workers=min(workers, len(files))) as executor:
            futures = {
                executor.submit(_transform_file, plugin, path, write): i
                for i, path in enumerate(files)
            }
            for future in as_completed(futures):
                idx = futures[future]
                try:
                    outcomes[idx] = future.result()
                except Exception as e:
                    logger.error(f"Failed to transform {files[idx]}: {e}", exc_info=True)
                    outcomes[idx] = FileOutcome(path=files[idx], error=e)
    else:
        for i, path in enumerate(files):
            try:
                outcomes[i] = _transform_file(plugin, path, write)
            except Exception as e:
                logger.error(f"Failed to transform {path}: {e}", exc_info=True)
                outcomes[i] = FileOutcome(path=path, error=e)

    changed = sum(1 for o in outcomes if o.changed)
    failed = sum(1 for o in outcomes if not o.ok)
    logger.info(f"Processed {len(files)} file(s): {changed} changed, {failed} failed")
    return outcomes
