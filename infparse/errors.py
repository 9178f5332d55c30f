"""Exceptions raised while reading INF files."""

from __future__ import annotations

from typing import Optional


class InfError(Exception):
    """Base class of every error raised by this package."""


class FileDoNotExistError(InfError, FileNotFoundError):
    """The file to parse does not exist."""

    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__("File does not exist")
        self.path = path


class FileOpenError(InfError, OSError):
    """The file exists but could not be opened."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"Failed to open file: {error}")
        self.error = error


class FileReadError(InfError, OSError):
    """The file could not be read."""

    def __init__(self) -> None:
        super().__init__("Failed to read file")


class LineReaderError(InfError):
    """Base class of errors found while splitting text into lines."""

    prefix = "Line reader error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail


class InvalidCrlfError(LineReaderError):
    """A carriage return was not followed by a line feed."""

    prefix = "Invalid CRLF sequence"


class SectionReaderError(InfError):
    """Base class of errors found while reading section contents."""

    prefix = "Section reader error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail


class InvalidSectionNameError(SectionReaderError):
    """A section header holds a name that is not allowed."""

    prefix = "Invalid section name"


class InvalidQuotedValueError(SectionReaderError):
    """A quoted value has no closing quote."""

    prefix = "Invalid quoted value"


class InvalidContinuationError(SectionReaderError):
    """Unexpected text follows the closing quote of a value."""

    prefix = "Invalid continuation"