from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from models.course import Course
from utils.binary_search_tree import BinarySearchTree
from utils.course_catalog import CatalogParsing, CatalogTextParser, read_catalog_source


class CatalogManager:
    """
    Owns the loaded catalog: one parser plus one ordered store keyed by course number.

    Loading is all-or-nothing. The text is parsed in full before the store is
    touched, so a failed load (missing file, bad encoding, malformed line)
    leaves the previous catalog exactly as it was.

    Errors (services.catalog_errors) propagate to the caller; nothing is
    logged or retried here.
    """

    def __init__(self, parser: CatalogParsing | None = None, encoding: str = "utf-8") -> None:
        self.parser = parser or CatalogTextParser()
        self.encoding = encoding
        self._store: BinarySearchTree[Course] = BinarySearchTree(key=lambda c: c.number)

    def load_catalog(self, source_text: str) -> int:
        """Replace the catalog with the courses in ``source_text``. Returns the number stored."""
        parsed = self.parser.parse(source_text)

        self._store.clear()
        for course in parsed:
            # a repeated number is ignored, the earlier line wins
            self._store.insert(course)

        return len(self._store)

    def load_file(self, path: str | Path) -> int:
        text = read_catalog_source(path, encoding=self.encoding)
        return self.load_catalog(text)

    def is_empty(self) -> bool:
        return self._store.is_empty

    def find_by_number(self, number: str) -> Optional[Course]:
        return self._store.search(number)

    def for_each_in_order(self, visit: Callable[[Course], None]) -> None:
        self._store.traverse_in_order(visit)

    def courses(self) -> list[Course]:
        return list(self._store)

    def __len__(self) -> int:
        return len(self._store)
