from __future__ import annotations

from pathlib import Path
from typing import Protocol

from models.course import Course
from services.catalog_errors import MalformedRecord, SourceNotFound, SourceUnreadable


class CatalogParsing(Protocol):
    """Anything that turns catalog text into courses (CSV today, other formats later)."""

    def parse(self, text: str) -> list[Course]:
        ...


class CatalogTextParser:
    """
    Flat delimited catalog, one course per line:

        number,title[,prereq1,prereq2,...]

    - blank (or whitespace only) lines are skipped
    - no header row, no quoting
    - empty prerequisite fields are dropped, the rest are kept as written
    - the first line with fewer than 2 fields raises MalformedRecord
    """

    def __init__(self, delimiter: str = ",") -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    def parse(self, text: str) -> list[Course]:
        courses: list[Course] = []

        # splitlines() handles \n, \r\n and \r endings
        for line in text.splitlines():
            if not line.strip():
                continue
            courses.append(self.parse_line(line))

        return courses

    def parse_line(self, line: str) -> Course:
        fields = line.split(self.delimiter)
        if len(fields) < 2:
            raise MalformedRecord(line)

        number, title, *rest = fields
        return Course(
            number=number,
            title=title,
            prerequisites=tuple(p for p in rest if p),
        )


def read_catalog_source(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a catalog file into text, mapping I/O problems onto catalog errors."""
    try:
        # newline="" keeps \r\n intact; the parser deals with line endings
        with Path(path).open(encoding=encoding, newline="") as fh:
            return fh.read()
    except FileNotFoundError as e:
        raise SourceNotFound(str(path)) from e
    except (UnicodeDecodeError, OSError) as e:
        # bad encoding, a directory, a name too long, no permission, ...
        raise SourceUnreadable(str(path), reason=str(e)) from e
