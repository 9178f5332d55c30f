"""Reading whole INF files into sections."""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Union

from .errors import FileDoNotExistError, FileOpenError, FileReadError
from .lines import LineReader
from .sections import SectionReader
from .types import InfSection

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024
_BOM_LENGTH = 3

PathType = Union[str, "PathLike[str]"]


def _encoding_for(head: bytes) -> str:
    """Pick a decoder from the byte order mark, if there is one."""
    if head.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    if head.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        # The utf-16 codec reads the mark, picks the byte order and drops it.
        return "utf-16"
    return "utf-8"


def _decode(chunks: Iterable[bytes]) -> Iterator[str]:
    """Decode a stream of byte chunks, choosing the encoding from its start."""
    chunks = iter(chunks)
    head = b""
    for chunk in chunks:
        head += chunk
        if len(head) >= _BOM_LENGTH:
            break
    encoding = _encoding_for(head)
    logger.debug("decoding INF text as %s", encoding)
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    yield decoder.decode(head)
    for chunk in chunks:
        yield decoder.decode(chunk)
    yield decoder.decode(b"", final=True)


def _read_chunks(handle: BinaryIO) -> Iterator[bytes]:
    while True:
        try:
            chunk = handle.read(_CHUNK_SIZE)
        except OSError as error:
            raise FileReadError() from error
        if not chunk:
            return
        yield chunk


@dataclass
class WinInfFile:
    """The sections of a Windows INF file, keyed by section name.

    Parsing more than once adds to the sections already read.
    """

    sections: dict[str, InfSection] = field(default_factory=dict)
    _section_reader: SectionReader = field(
        default_factory=SectionReader, repr=False, compare=False
    )

    def parse(self, file_path: PathType) -> None:
        """Read the INF file at ``file_path`` into :attr:`sections`.

        The text is UTF-8 unless the file starts with a byte order mark.
        Raises :class:`FileDoNotExistError`, :class:`FileOpenError`,
        :class:`FileReadError` or a line or section reader error.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileDoNotExistError(str(path))
        try:
            handle = path.open("rb")
        except OSError as error:
            raise FileOpenError(error) from error
        with handle:
            self._parse_chunks(_read_chunks(handle))

    def parse_bytes(self, data: bytes) -> None:
        """Read INF content held in memory into :attr:`sections`."""
        self._parse_chunks([bytes(data)])

    def _parse_chunks(self, chunks: Iterable[bytes]) -> None:
        line_reader = LineReader()
        for text in _decode(chunks):
            line_reader.read_to_line(text)
            self._read_lines(line_reader.take_lines())
        line_reader.finalize()
        self._read_lines(line_reader.take_lines())
        for name, section in self.sections.items():
            logger.debug(">> section name: %s, section: %r", name, section)

    def _read_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._section_reader.read_section(line, self.sections)


def parse_file(file_path: PathType) -> WinInfFile:
    """Parse the INF file at ``file_path`` and return its contents."""
    inf_file = WinInfFile()
    inf_file.parse(file_path)
    return inf_file