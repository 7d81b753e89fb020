"""Custom exceptions for sitetree."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class SitetreeError(Exception):
    """Base exception for sitetree operations."""


class ExportError(SitetreeError):
    """A site tree export could not complete."""


class FilesystemAccessError(ExportError):
    """A directory or page could not be read, or the output could not be written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class UnknownClassifierError(SitetreeError, ValueError):
    """No sitemap classifier is registered under the requested key."""
