"""Errors raised while reading or writing the warnings file."""

from __future__ import annotations

from pathlib import Path


class WarningsStoreError(Exception):
    """Base class for warnings file failures. ``path`` is the file involved."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class WarningsFileNotFoundError(WarningsStoreError):
    """The warnings file does not exist or is not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No warnings file '{path}' found", path)


class WarningsReadError(WarningsStoreError):
    """The warnings file exists but could not be read."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed reading from file '{path}': {detail}", path)
        self.detail = detail


class WarningsParseError(WarningsStoreError):
    """The warnings file content is not a valid serialized store."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Invalid warnings file '{path}': {detail}", path)
        self.detail = detail


class WarningsWriteError(WarningsStoreError):
    """The warnings file or its parent directory could not be written."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed writing warnings to '{path}': {detail}", path)
        self.detail = detail
