"""Models describing a single export run."""
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .tree import TreeNode


class ExportStatus(str, Enum):
    """Status of an export run."""
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ExportResult(BaseModel):
    """Outcome of an export run."""
    status: ExportStatus = Field(ExportStatus.RUNNING, description="Run status")
    output_path: Path = Field(..., description="Where the tree is (or would be) written")
    page_count: int = Field(0, description="Number of included pages", ge=0)
    written: bool = Field(False, description="Whether the output file was written")
    dry_run: bool = Field(False, description="Whether writing was skipped on purpose")
    error: Optional[str] = Field(None, description="Error message for failed runs")
    tree: Optional[TreeNode] = Field(None, description="The built tree, if any")

    @property
    def succeeded(self) -> bool:
        """Whether the run completed successfully."""
        return self.status == ExportStatus.SUCCEEDED
