"""Custom exceptions for the prefixer."""

from typing import Optional


class PrefixerError(Exception):
    """Base exception for prefixer errors."""

    pass


class SourceParseError(PrefixerError):
    """Raised when a source unit cannot be parsed without errors."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        file_id: Optional[str] = None,
    ):
        self.line = line
        self.column = column
        self.file_id = file_id
        location = ""
        if line is not None:
            location = f" at line {line}, column {column}"
        if file_id:
            location = f" in {file_id}{location}"
        super().__init__(f"{message}{location}")


class EditConflictError(PrefixerError):
    """Raised when two replacement instructions overlap."""

    pass


class ConfigError(PrefixerError):
    """Raised when prefixer options are invalid or cannot be loaded."""

    pass


class BuildStateError(PrefixerError):
    """Raised when a transform runs outside of a started build cycle."""

    pass
