"""Site tree export pipeline: classification, title extraction, walking and serialization."""

from .builder import TreeBuilder
from .classifiers import (
    IndexPageClassifier,
    MetaDirectiveClassifier,
    SitemapClassifier,
    available_classifiers,
    get_classifier,
    register_classifier,
)
from .extractors import extract_title
from .serializer import render_outline, serialize_tree, write_tree

__all__ = [
    "TreeBuilder",
    "IndexPageClassifier",
    "MetaDirectiveClassifier",
    "SitemapClassifier",
    "available_classifiers",
    "get_classifier",
    "register_classifier",
    "extract_title",
    "render_outline",
    "serialize_tree",
    "write_tree",
]
