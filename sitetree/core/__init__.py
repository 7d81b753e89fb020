"""Core functionality for sitetree."""

from .export import ExportConfig, ExportService

__all__ = [
    "ExportConfig",
    "ExportService",
]
