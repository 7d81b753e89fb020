"""sitetree: export a static site's page hierarchy to JSON for sitemaps."""

__version__ = "0.1.0"
__license__ = "MIT"

# Import key components for easier access
from .core import ExportConfig, ExportService
from .exceptions import (
    ExportError,
    FilesystemAccessError,
    SitetreeError,
    UnknownClassifierError,
)
from .exporter import (
    SitemapClassifier,
    TreeBuilder,
    extract_title,
    get_classifier,
    register_classifier,
    serialize_tree,
    write_tree,
)
from .models import ExportResult, ExportStatus, SitemapVerdict, TreeNode

__all__ = [
    "ExportConfig",
    "ExportService",
    "ExportError",
    "FilesystemAccessError",
    "SitetreeError",
    "UnknownClassifierError",
    "SitemapClassifier",
    "TreeBuilder",
    "extract_title",
    "get_classifier",
    "register_classifier",
    "serialize_tree",
    "write_tree",
    "ExportResult",
    "ExportStatus",
    "SitemapVerdict",
    "TreeNode",
]
