"""JSON serialization of site trees."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional, Union

from ..exceptions import FilesystemAccessError
from ..models.tree import TreeNode

logger = logging.getLogger(__name__)

JSON_INDENT = 2
OUTLINE_INDENT = "  "


def serialize_tree(node: Optional[TreeNode], root_name: str) -> str:
    """Serialize a tree to formatted JSON.

    Args:
        node: Root node, or None when nothing in the project is included.
        root_name: Name used for the empty root node when ``node`` is None.

    Returns:
        The JSON document, terminated by a newline.
    """
    if node is None:
        node = TreeNode.directory(root_name, [])
    return json.dumps(node.to_dict(), indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_tree(
    node: Optional[TreeNode],
    output_path: Union[str, Path],
    root_name: str,
) -> Path:
    """Write a tree to ``output_path``, replacing any previous contents.

    Missing parent directories are created. The document is written to a
    temporary file in the same directory and then renamed over the
    destination, so readers never see a partially written file.

    Args:
        node: Root node, or None for an empty tree.
        output_path: Destination JSON file.
        root_name: Name used for the empty root node.

    Returns:
        The path that was written.

    Raises:
        FilesystemAccessError: If the destination cannot be created or written.
    """
    output_path = Path(output_path)
    document = serialize_tree(node, root_name)
    tmp_path = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=str(output_path.parent),
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(document)
        tmp_path.replace(output_path)
    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise FilesystemAccessError(
            f"Cannot write site tree to {output_path}: {e}", output_path
        ) from e
    logger.debug(f"Wrote {len(document)} characters to {output_path}")
    return output_path


def render_outline(node: Optional[TreeNode], depth: int = 0) -> str:
    """Render a tree as an indented plain-text outline.

    Directories end with ``/``; pages show their title and path.
    """
    if node is None:
        return ""
    indent = OUTLINE_INDENT * depth
    if node.is_page:
        line = f"{indent}{node.title} ({node.path})"
    else:
        line = f"{indent}{node.name}/"
    fragments = [line]
    for child in node.children or []:
        fragments.append(render_outline(child, depth + 1))
    return "\n".join(fragments)
