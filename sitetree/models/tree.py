"""Site tree models for sitetree."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SitemapVerdict(str, Enum):
    """Inclusion decision for a single page."""
    INCLUDE = "include"
    EXCLUDE = "exclude"
    UNSPECIFIED = "unspecified"


class TreeNode(BaseModel):
    """A directory or an included page in the exported site tree.

    Directory nodes carry only ``name`` and ``children``. Page nodes carry
    ``name``, ``path``, ``title`` and ``sitemap`` and never have children.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="File or directory base name")
    path: Optional[str] = Field(
        None, description="Project-relative POSIX path (pages only)"
    )
    title: Optional[str] = Field(
        None, min_length=1, description="Display title (pages only)"
    )
    sitemap: Optional[bool] = Field(
        None, description="True on included page nodes"
    )
    children: Optional[List[TreeNode]] = Field(
        None, description="Child nodes (directories only)"
    )

    @classmethod
    def page(cls, name: str, path: str, title: str) -> TreeNode:
        """Create an included page node."""
        return cls(name=name, path=path, title=title, sitemap=True)

    @classmethod
    def directory(cls, name: str, children: List[TreeNode]) -> TreeNode:
        """Create a directory node; an empty child list is stored as absent."""
        return cls(name=name, children=list(children) or None)

    @property
    def is_page(self) -> bool:
        """Whether this node represents an included page."""
        return bool(self.sitemap)

    def page_count(self) -> int:
        """Count the included pages at or below this node."""
        if self.is_page:
            return 1
        return sum(child.page_count() for child in self.children or [])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for serialization, dropping unset fields."""
        return self.model_dump(exclude_none=True)


TreeNode.model_rebuild()
