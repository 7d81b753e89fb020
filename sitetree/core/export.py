"""Site tree export service for sitetree."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import ExportError
from ..exporter.builder import DEFAULT_PAGE_SUFFIX, TreeBuilder
from ..exporter.classifiers import DEFAULT_CLASSIFIER, get_classifier
from ..exporter.serializer import render_outline, write_tree
from ..models.export import ExportResult, ExportStatus
from ..models.tree import TreeNode

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("assets") / "data" / "tree.json"


class ExportConfig(BaseModel):
    """Configuration for a site tree export."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(
        default=Path("."),
        description="Project root to scan",
    )
    output: Path = Field(
        default=DEFAULT_OUTPUT,
        description="Output JSON file; relative paths are resolved against the root",
    )
    classifier: str = Field(
        default=DEFAULT_CLASSIFIER,
        description="Key of the sitemap classifier to use",
    )
    page_suffix: str = Field(
        default=DEFAULT_PAGE_SUFFIX,
        description="File name ending that identifies a page",
        min_length=1,
    )
    exclude_dirs: List[str] = Field(
        default_factory=list,
        description="Directory names that are never scanned",
    )
    dry_run: bool = Field(
        default=False,
        description="Build and log the tree without writing the output file",
    )

    @field_validator("exclude_dirs", mode="before")
    @classmethod
    def split_exclude_dirs(cls, value):
        """Accept a comma separated string as well as a list."""
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value

    @classmethod
    def from_env(cls, **overrides) -> ExportConfig:
        """Create a config from ``SITETREE_*`` environment variables.

        Args:
            **overrides: Values that take precedence over the environment.
                None values are ignored.

        Returns:
            ExportConfig instance.
        """
        env = {
            "root": os.getenv("SITETREE_ROOT"),
            "output": os.getenv("SITETREE_OUTPUT"),
            "classifier": os.getenv("SITETREE_CLASSIFIER"),
            "page_suffix": os.getenv("SITETREE_PAGE_SUFFIX"),
            "exclude_dirs": os.getenv("SITETREE_EXCLUDE_DIRS"),
        }
        values = {key: value for key, value in env.items() if value}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @property
    def root_path(self) -> Path:
        """Absolute scan root."""
        return self.root.expanduser().resolve()

    @property
    def output_path(self) -> Path:
        """Absolute output path."""
        output = self.output.expanduser()
        if not output.is_absolute():
            output = self.root_path / output
        return output


class ExportService:
    """Service that builds the site tree and writes it to disk."""

    def __init__(self, config: Optional[ExportConfig] = None):
        """Initialize the export service.

        Args:
            config: Export configuration. Defaults to scanning the working
                directory with the default classifier.
        """
        self.config = config or ExportConfig()
        self.builder = TreeBuilder(
            classifier=get_classifier(self.config.classifier),
            page_suffix=self.config.page_suffix,
            exclude_dirs=self.config.exclude_dirs,
        )

    def build(self) -> Optional[TreeNode]:
        """Build the site tree without writing anything.

        Returns:
            The root node, or None if no page is included.

        Raises:
            FilesystemAccessError: If the project cannot be read.
        """
        root = self.config.root_path
        logger.info(f"Scanning {root} for pages ({self.builder.classifier.key} classifier)")
        return self.builder.build(root)

    def run(self) -> ExportResult:
        """Run a complete export.

        The whole tree is built before the output file is touched, so a
        failed run leaves any previous output in place.

        Returns:
            ExportResult describing the run. Failures are reported with
            ``status == ExportStatus.FAILED`` rather than raised.
        """
        root = self.config.root_path
        result = ExportResult(
            output_path=self.config.output_path,
            dry_run=self.config.dry_run,
        )

        try:
            tree = self.build()
            result.tree = tree
            result.page_count = tree.page_count() if tree else 0

            if tree is None:
                logger.warning(f"No included pages found under {root}")

            if self.config.dry_run:
                logger.info(f"Dry run, not writing {result.output_path}")
                if tree is not None:
                    logger.info("Site tree:\n" + render_outline(tree))
            else:
                write_tree(tree, result.output_path, root.name)
                result.written = True
        except ExportError as e:
            logger.error(f"Export failed: {e}")
            result.status = ExportStatus.FAILED
            result.error = str(e)
            return result

        result.status = ExportStatus.SUCCEEDED
        logger.debug(
            f"Export complete: {result.page_count} page(s)"
            + ("" if self.config.dry_run else f", site tree written to {result.output_path}")
        )
        return result
