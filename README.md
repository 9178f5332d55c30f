# infparse

A small parser for Windows INF setup files, the text files that describe how a
device driver is installed. It reads the file's sections and entries into plain
Python objects.

## Installing

From a checkout of the project:

```
pip install .
```

The package has no dependencies outside the standard library.

## Usage

```python
from infparse.inffile import WinInfFile, parse_file
from infparse.types import KeyValue, OnlyValue, Raw

inf = parse_file("driver.inf")

version = inf.sections["Version"]
for entry in version.entries:
    if isinstance(entry, KeyValue):
        print(entry.key, "=", entry.value.text)
    elif isinstance(entry, OnlyValue):
        print(entry.value.text)
```

Content already in memory can be parsed with `WinInfFile.parse_bytes`:

```python
inf = WinInfFile()
inf.parse_bytes(b"[Version]\r\nSignature=\"$Windows NT$\"\r\n")
assert inf.sections["Version"].entries == [KeyValue("Signature", Raw("$Windows NT$"))]
```

`WinInfFile.sections` is a dict from section name to `InfSection`, whose
`entries` list keeps the file's order. Calling `parse` or `parse_bytes` again on
the same `WinInfFile` adds to the sections already read.

### Encoding

Text is read as UTF-8 unless it starts with a byte order mark. A UTF-8 mark is
dropped; a UTF-16 mark (little- or big-endian) makes the text be decoded as
UTF-16 in that byte order. Bytes that do not decode are replaced with U+FFFD.

### What gets parsed

- Line endings may be `\n` or `\r\n`. A `\r` that is not followed by `\n` is an
  error. Empty lines are skipped, and each line is stripped of surrounding
  whitespace.
- Lines starting with `;` are comments.
- `[Name]` lines start a section. An unquoted name may not contain spaces, tabs,
  `[`, `]`, `;`, `"`, `\r` or `\n`, may not end with `\`, and `%` must appear in
  pairs. A quoted name must close its quotes and may not contain `]`. A section
  header that repeats an earlier name starts that section afresh.
- Lines before the first section header are ignored.
- `key = value` lines become `KeyValue(key, Raw(value))` entries, with key and
  value stripped. Lines without `=` become `OnlyValue(Raw(line))` entries.
- A value in double quotes loses its quotes. After the closing quote only a `;`
  comment or a `\` continuation may follow.
- In an unquoted value, a `;` starts a trailing comment.
- A value ending in `\` continues on the next line, which is appended to it to
  make a single entry. For unquoted values the text up to the first `\` is kept;
  a value that is only backslashes is dropped.

Parsed values are always `Raw`. The types module also defines `CommaSeparated`
and `ListValue` for callers that want to split values themselves.

### Lower-level pieces

- `infparse.lines.LineReader` splits text that arrives in chunks into lines
  (`read_to_line`, `take_lines`, `finalize`).
- `infparse.sections.SectionReader.read_section(line, sections)` applies one
  line to a dict of sections.
- `infparse.sections.validate_section_name(name)` checks a section name.

### Errors

All failures raise a subclass of `infparse.errors.InfError`:

- `FileDoNotExistError` (also a `FileNotFoundError`), `FileOpenError` and
  `FileReadError` (both also `OSError`) for file problems
- `InvalidCrlfError` (a `LineReaderError`) for a bad line ending
- `InvalidSectionNameError`, `InvalidQuotedValueError` and
  `InvalidContinuationError` (all `SectionReaderError`) for malformed content

## What it does not do

- There is no command-line tool; it is a library only.
- `%name%` references are not replaced with their `[Strings]` values.
- Values are not split into fields or checked against the meaning of their
  section.
- Only one continuation line is joined to a value.
- INF files cannot be written back out.

## Running the tests

```
pip install -e ".[test]"
pytest
```