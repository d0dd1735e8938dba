from __future__ import annotations


class SheetkeeperError(Exception):
    """Base exception for sheetkeeper."""


class InvalidArgumentError(SheetkeeperError, ValueError):
    """Raised when a caller passes a value outside an operation's domain."""


class ResourceUnavailableError(SheetkeeperError):
    """Raised when the source workbook or the backups folder cannot be opened."""

    def __init__(self, kind: str, location: object) -> None:
        self.kind = kind
        self.location = location
        super().__init__(f"{kind} {location} unavailable")


class EmptyFolderError(SheetkeeperError):
    """Raised when the backups folder holds no workbook to compare against."""

    def __init__(self, folder: object) -> None:
        self.folder = folder
        super().__init__(f"Folder {folder} is empty.")
