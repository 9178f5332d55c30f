"""Turning logical INF lines into sections and entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import (
    InvalidContinuationError,
    InvalidQuotedValueError,
    InvalidSectionNameError,
)
from .types import InfSection, KeyValue, OnlyValue, Raw

logger = logging.getLogger(__name__)

_UNQUOTED_FORBIDDEN = frozenset("\r\n\" \t[];")


def validate_section_name(name: str) -> None:
    """Raise :class:`InvalidSectionNameError` if ``name`` is not allowed."""
    logger.debug("validate section name: %s", name)
    if name.startswith('"'):
        if not name.endswith('"'):
            raise InvalidSectionNameError("invalid quoted section name")
        if "]" in name:
            raise InvalidSectionNameError("invalid ] in the quoted section name")
        return
    if name.endswith("\\"):
        raise InvalidSectionNameError("invalid \\ at the end of section name")
    if name.count("%") % 2 != 0:
        raise InvalidSectionNameError(
            "odd number of % in the section name, expected pairs"
        )
    if any(char in _UNQUOTED_FORBIDDEN for char in name):
        raise InvalidSectionNameError(
            "contains invalid chars in unquoted section name"
        )


@dataclass
class SectionReader:
    """Reads lines one at a time, remembering the current section and any
    value that continues on the next line."""

    last_section_name: str = ""
    last_entry_key: str = ""
    last_entry_value_contd: str = ""

    def read_section(self, line: str, sections: dict[str, InfSection]) -> None:
        """Apply one logical line to ``sections``, updating them in place."""
        line = line.strip()

        if line.startswith(";"):
            return

        if line.startswith("[") and line.endswith("]"):
            name = line[1:-1]
            validate_section_name(name)
            sections[name] = InfSection(name=name)
            self.last_section_name = name
            return

        if not self.last_section_name:
            return

        logger.debug("processing entries for section name: %s", self.last_section_name)
        key, sep, value = line.partition("=")
        if sep:
            self._read_key_value(key.strip(), value.strip(), sections)
        else:
            self._read_bare_value(line, sections)

    def _read_key_value(
        self, key: str, value: str, sections: dict[str, InfSection]
    ) -> None:
        section = sections.get(self.last_section_name)
        if value.startswith('"'):
            logger.debug("processing quoted value: %s", value)
            closing = value.find('"', 1)
            if closing == -1:
                raise InvalidQuotedValueError(
                    f"no ending double quote found, key: {key}, "
                    f"section: {self.last_section_name}"
                )
            if len(value) - 1 > closing:
                following = value[closing + 1]
                if following == "\\":
                    self.last_entry_key = key
                    self.last_entry_value_contd = value[1:closing]
                    return
                if following != ";":
                    raise InvalidContinuationError(
                        f"Invalid INF entry value: {value}, no continuation char "
                        f"found after ending double quote, key: {key}, "
                        f"section_name: {self.last_section_name}"
                    )
            self.last_entry_value_contd = ""
            if section is not None:
                section.entries.append(KeyValue(key, Raw(value[1:closing])))
            return

        logger.debug("processing unquoted value: %s", value)
        if ";" in value:
            value = value.split(";", 1)[0].strip()

        if value.endswith("\\"):
            # Only the last backslash continues the line; the others are dropped.
            first_backslash = value.find("\\")
            if first_backslash > 0:
                self.last_entry_value_contd = value[:first_backslash]
                self.last_entry_key = key
            else:
                self.last_entry_value_contd = ""
                self.last_entry_key = ""
            return

        self.last_entry_value_contd = ""
        self.last_entry_key = ""
        if section is not None:
            section.entries.append(KeyValue(key, Raw(value)))

    def _read_bare_value(self, value: str, sections: dict[str, InfSection]) -> None:
        section = sections.get(self.last_section_name)
        if self.last_entry_value_contd:
            if section is not None:
                self.last_entry_value_contd += value
                section.entries.append(
                    KeyValue(self.last_entry_key, Raw(self.last_entry_value_contd))
                )
            self.last_entry_value_contd = ""
            self.last_entry_key = ""
        elif section is not None:
            section.entries.append(OnlyValue(Raw(value)))