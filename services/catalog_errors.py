from __future__ import annotations


class CatalogError(Exception):
    """Base class for anything that aborts a catalog load."""


class SourceNotFound(CatalogError):
    def __init__(self, path: str) -> None:
        self.path = str(path)
        super().__init__(f"File not found: {self.path}")


class SourceUnreadable(CatalogError):
    # bad encoding, a directory, permissions, ... (reason is the underlying error text)
    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unreadable file: {self.path}")


class MalformedRecord(CatalogError):
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Malformed course: {line}")
