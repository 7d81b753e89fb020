"""Sitemap classification strategies.

A classifier decides, for one page, whether it belongs in the exported
site tree. The default strategy reads an embedded directive:

    <meta name="sitemap" content="include">
    <meta content="exclude" name="sitemap" />

An alternative strategy keeps only ``index.html`` pages. Strategies are
looked up by key through a small registry so the tree builder never has to
know which policy is in effect.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from lxml import etree

from ..exceptions import UnknownClassifierError
from ..models.tree import SitemapVerdict

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFIER = "meta"

_DIRECTIVE_VALUES = (SitemapVerdict.INCLUDE.value, SitemapVerdict.EXCLUDE.value)


def _parse_html(html: str) -> Optional[etree._Element]:
    """Parse page text leniently; returns None for an empty document."""
    if not html.strip():
        return None
    # Bytes input so pages with an XML encoding declaration are accepted.
    parser = etree.HTMLParser(encoding="utf-8")
    return etree.HTML(html.encode("utf-8"), parser=parser)


class SitemapClassifier(ABC):
    """Base class for sitemap classifiers."""

    key: str
    "Registry key used to select this classifier"

    description: str = ""
    "One-line description shown in CLI help"

    @abstractmethod
    def classify(self, name: str, html: str) -> SitemapVerdict:
        """Classify a page.

        Args:
            name: Base name of the page file.
            html: Full page text.

        Returns:
            The inclusion verdict for the page.
        """


class MetaDirectiveClassifier(SitemapClassifier):
    """Classify pages by their ``<meta name="sitemap">`` directive.

    Include and exclude directives are detected independently. A page that
    carries both is included.
    """

    key = "meta"
    description = "use <meta name=\"sitemap\" content=\"include|exclude\">"

    def directives(self, html: str) -> List[str]:
        """Return the recognized directive values found in the page, in order."""
        root = _parse_html(html)
        if root is None:
            return []

        found = []
        for element in root.xpath("//meta"):
            if (element.get("name") or "").lower() != "sitemap":
                continue
            content = (element.get("content") or "").lower()
            if content in _DIRECTIVE_VALUES:
                found.append(content)
        return found

    def classify(self, name: str, html: str) -> SitemapVerdict:
        found = self.directives(html)
        if SitemapVerdict.INCLUDE.value in found:
            if SitemapVerdict.EXCLUDE.value in found:
                logger.debug(f"{name} has both include and exclude directives; including")
            return SitemapVerdict.INCLUDE
        if SitemapVerdict.EXCLUDE.value in found:
            return SitemapVerdict.EXCLUDE
        return SitemapVerdict.UNSPECIFIED


class IndexPageClassifier(SitemapClassifier):
    """Include only folder landing pages named ``index.html``."""

    key = "index"
    description = "include only index.html pages"

    index_name = "index.html"

    def classify(self, name: str, html: str) -> SitemapVerdict:
        if name.lower() == self.index_name:
            return SitemapVerdict.INCLUDE
        return SitemapVerdict.EXCLUDE


# Registry of available classifiers
_CLASSIFIERS: Dict[str, Type[SitemapClassifier]] = {
    classifier.key: classifier
    for classifier in [
        MetaDirectiveClassifier,
        IndexPageClassifier,
    ]
}


def available_classifiers() -> List[str]:
    """Return the registered classifier keys in sorted order."""
    return sorted(_CLASSIFIERS)


def get_classifier(key: Optional[str] = None) -> SitemapClassifier:
    """Get a classifier instance by registry key.

    Args:
        key: Classifier key. If None, the default classifier is returned.

    Returns:
        A new classifier instance.

    Raises:
        UnknownClassifierError: If no classifier is registered under ``key``.
    """
    normalized = (key or DEFAULT_CLASSIFIER).strip().lower()
    try:
        return _CLASSIFIERS[normalized]()
    except KeyError:
        raise UnknownClassifierError(
            f"Unknown classifier {key!r}; choose one of: {', '.join(available_classifiers())}"
        ) from None


def register_classifier(classifier: Type[SitemapClassifier]) -> None:
    """Register a custom sitemap classifier.

    Args:
        classifier: Classifier class to register.
    """
    if not (isinstance(classifier, type) and issubclass(classifier, SitemapClassifier)):
        raise TypeError(
            f"Classifier must be a subclass of SitemapClassifier, got {classifier!r}"
        )
    _CLASSIFIERS[classifier.key] = classifier
    logger.info(f"Registered classifier {classifier.key}")
