"""Re-serialization by splicing replacement instructions into source bytes.

The tree is never mutated: each rewrite becomes a ``SourceEdit`` keyed by the
byte range of the node it replaces. Text outside the edits is emitted
byte-for-byte, so formatting and line numbers elsewhere are preserved.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..exceptions import EditConflictError


@dataclass(frozen=True)
class SourceEdit:
    """Replace ``source[start:end]`` (byte offsets) with ``text``."""

    start: int
    end: int
    text: str

    @property
    def data(self) -> bytes:
        return self.text.encode("utf-8")

    @property
    def delta(self) -> int:
        """Change in byte length caused by this edit."""
        return len(self.data) - (self.end - self.start)


def sort_edits(edits: Iterable[SourceEdit]) -> List[SourceEdit]:
    """
    Sort edits by position and check they do not overlap.

    Raises:
        EditConflictError: If two edits touch overlapping byte ranges.
    """
    ordered = sorted(edits, key=lambda edit: (edit.start, edit.end))
    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            raise EditConflictError(
                f"Overlapping edits at bytes {previous.start}-{previous.end} "
                f"and {current.start}-{current.end}"
            )
    return ordered


def apply_edits(source: bytes, edits: Iterable[SourceEdit]) -> bytes:
    """
    Apply replacement instructions to ``source``.

    Args:
        source: Original source bytes.
        edits: Non-overlapping edits in any order.

    Returns:
        The rewritten source bytes.
    """
    ordered = sort_edits(edits)
    for edit in ordered:
        if edit.start < 0 or edit.end > len(source) or edit.start > edit.end:
            raise EditConflictError(
                f"Edit range {edit.start}-{edit.end} is outside the source "
                f"({len(source)} bytes)"
            )

    out = bytearray(source)
    for edit in reversed(ordered):
        out[edit.start:edit.end] = edit.data
    return bytes(out)


def translate_offset(edits: Sequence[SourceEdit], offset: int) -> int:
    """
    Map a byte offset in the original source to the rewritten output.

    Offsets inside a replaced range map into the replacement, clamped to its
    end.
    """
    shift = 0
    for edit in sort_edits(edits):
        if offset >= edit.end:
            shift += edit.delta
        elif offset >= edit.start:
            inner = min(offset - edit.start, len(edit.data))
            return edit.start + shift + inner
        else:
            break
    return offset + shift
