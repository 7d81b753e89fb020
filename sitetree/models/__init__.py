"""Pydantic models for sitetree."""

from .export import ExportResult, ExportStatus
from .tree import SitemapVerdict, TreeNode

__all__ = [
    "ExportResult",
    "ExportStatus",
    "SitemapVerdict",
    "TreeNode",
]
