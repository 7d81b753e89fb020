"""Recursive site tree builder.

Walks a project directory depth-first and keeps only the pages a
classifier marks for inclusion. Directories that end up without any
included page below them are pruned.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Union

from ..exceptions import FilesystemAccessError
from ..models.tree import SitemapVerdict, TreeNode
from .classifiers import SitemapClassifier, get_classifier
from .extractors import extract_title

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SUFFIX = ".html"


class TreeBuilder:
    """Build a pruned :class:`TreeNode` hierarchy from a directory."""

    def __init__(
        self,
        classifier: Optional[SitemapClassifier] = None,
        page_suffix: str = DEFAULT_PAGE_SUFFIX,
        exclude_dirs: Iterable[str] = (),
    ):
        """Initialize the tree builder.

        Args:
            classifier: Strategy deciding which pages are included.
                Defaults to the ``meta`` directive classifier.
            page_suffix: File name ending that identifies a page.
            exclude_dirs: Directory names that are never descended into.
        """
        self.classifier = classifier or get_classifier()
        self.page_suffix = page_suffix
        self.exclude_dirs = frozenset(exclude_dirs)

    def build(
        self,
        directory: Union[str, Path],
        relative: PurePosixPath = PurePosixPath(),
    ) -> Optional[TreeNode]:
        """Build the node for ``directory``.

        Args:
            directory: Directory to scan.
            relative: Path of ``directory`` relative to the scan root.

        Returns:
            A directory node with at least one child, or None if nothing
            below ``directory`` is included.

        Raises:
            FilesystemAccessError: If a directory or page cannot be read.
        """
        directory = Path(directory)
        children: List[TreeNode] = []

        for entry in self._scan(directory):
            entry_relative = relative / entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_page = (
                    not is_dir
                    and entry.is_file()
                    and entry.name.endswith(self.page_suffix)
                )
            except OSError as e:
                raise FilesystemAccessError(
                    f"Cannot inspect {entry.path}: {e}", entry.path
                ) from e

            if is_dir:
                if entry.name in self.exclude_dirs:
                    logger.debug(f"Skipping excluded directory {entry.path}")
                    continue
                child = self.build(entry.path, entry_relative)
                if child is not None:
                    children.append(child)
            elif is_page:
                page = self._build_page(Path(entry.path), entry_relative)
                if page is not None:
                    children.append(page)

        if not children:
            return None
        return TreeNode.directory(directory.name, children)

    def _scan(self, directory: Path) -> List[os.DirEntry]:
        """List the entries of ``directory`` sorted by name."""
        try:
            with os.scandir(directory) as entries:
                return sorted(entries, key=lambda entry: entry.name)
        except OSError as e:
            raise FilesystemAccessError(
                f"Cannot read directory {directory}: {e}", directory
            ) from e

    def _build_page(self, path: Path, relative: PurePosixPath) -> Optional[TreeNode]:
        """Classify one page file and build its node if it is included."""
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FilesystemAccessError(f"Cannot read page {path}: {e}", path) from e

        verdict = self.classifier.classify(path.name, html)

        if verdict == SitemapVerdict.EXCLUDE:
            logger.info(f"[EXCLUDED] {path} - skipped by developer intent")
            return None
        if verdict == SitemapVerdict.UNSPECIFIED:
            logger.warning(f"[SITEMAP TAG MISSING] {path} - page was skipped")
            return None

        title = extract_title(html)
        if title is None:
            logger.warning(f"[TITLE MISSING] {path} - using file name as title")
            title = path.name

        return TreeNode.page(name=path.name, path=relative.as_posix(), title=title)
