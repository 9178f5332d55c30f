"""Splitting decoded INF text into logical lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidCrlfError


@dataclass
class LineReader:
    """Collects complete lines from text that arrives in chunks.

    Lines end with ``\\n`` or ``\\r\\n``. Empty lines are dropped. Text after
    the last line ending is kept in ``remaining_string`` until more text
    arrives or :meth:`finalize` is called.
    """

    remaining_string: str = ""
    lines: list[str] = field(default_factory=list)

    def read_to_line(self, line_part: str) -> None:
        """Add a chunk of text, moving every completed line into ``lines``.

        Raises :class:`InvalidCrlfError` when a carriage return is followed
        by anything other than a line feed.
        """
        found_cr = False
        current: list[str] = []
        for char in self.remaining_string + line_part:
            if found_cr:
                if char != "\n":
                    raise InvalidCrlfError("found \\r but not \\n immediately")
                self._flush(current)
                found_cr = False
                continue
            if char == "\r":
                found_cr = True
            elif char == "\n":
                self._flush(current)
            else:
                current.append(char)
        self.remaining_string = "".join(current)

    def take_lines(self) -> list[str]:
        """Return the completed lines and forget them."""
        taken, self.lines = self.lines, []
        return taken

    def finalize(self) -> None:
        """Treat the unterminated text at the end of input as a last line."""
        if self.remaining_string:
            self.lines.append(self.remaining_string)

    def _flush(self, current: list[str]) -> None:
        if current:
            self.lines.append("".join(current))
            current.clear()