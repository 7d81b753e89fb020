"""Tests for site tree serialization."""
import json
from pathlib import Path

import pytest

from sitetree.exceptions import FilesystemAccessError
from sitetree.exporter.serializer import render_outline, serialize_tree, write_tree
from sitetree.models.tree import TreeNode

EXPECTED_JSON = """{
  "name": "site",
  "children": [
    {
      "name": "a.html",
      "path": "a.html",
      "title": "A",
      "sitemap": true
    }
  ]
}
"""


@pytest.fixture
def tree():
    """A small site tree: one root page and one nested page."""
    return TreeNode.directory(
        "site",
        [
            TreeNode.directory(
                "blog", [TreeNode.page("post.html", "blog/post.html", "Post")]
            ),
            TreeNode.page("index.html", "index.html", "Home"),
        ],
    )


def test_serialize_tree_golden():
    """Test the exact output format."""
    node = TreeNode.directory("site", [TreeNode.page("a.html", "a.html", "A")])
    assert serialize_tree(node, "site") == EXPECTED_JSON


def test_serialize_empty_tree():
    """Test that no tree becomes an empty root node."""
    assert json.loads(serialize_tree(None, "site")) == {"name": "site"}


def test_serialize_keeps_unicode():
    """Test that non-ASCII titles are written as-is."""
    node = TreeNode.directory("site", [TreeNode.page("cafe.html", "cafe.html", "Café")])
    assert '"title": "Café"' in serialize_tree(node, "site")


def test_serialize_omits_unset_fields(tree):
    """Directories have no page fields, pages have no children."""
    data = json.loads(serialize_tree(tree, "site"))
    blog, index = data["children"]
    assert set(blog) == {"name", "children"}
    assert set(index) == {"name", "path", "title", "sitemap"}


def test_write_tree_creates_parents(tmp_path, tree):
    """Test that missing output directories are created."""
    output = tmp_path / "assets" / "data" / "tree.json"

    written = write_tree(tree, output, "site")

    assert written == output
    assert json.loads(output.read_text(encoding="utf-8"))["name"] == "site"


def test_write_tree_overwrites(tmp_path, tree):
    """Test that previous output is replaced."""
    output = tmp_path / "tree.json"
    output.write_text("x" * 10000, encoding="utf-8")

    write_tree(tree, output, "site")

    assert output.read_text(encoding="utf-8") == serialize_tree(tree, "site")


def test_write_tree_is_idempotent(tmp_path, tree):
    """Test that writing the same tree twice gives identical bytes."""
    output = tmp_path / "tree.json"
    write_tree(tree, output, "site")
    first = output.read_bytes()
    write_tree(tree, output, "site")
    assert output.read_bytes() == first


def test_write_tree_failure(tmp_path, tree):
    """Test that an unwritable destination raises FilesystemAccessError."""
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(FilesystemAccessError):
        write_tree(tree, blocker / "tree.json", "site")


def test_write_tree_failed_rename_keeps_previous_output(tmp_path, tree, monkeypatch):
    """Test that a write interrupted before the rename leaves the old file whole."""
    output = tmp_path / "tree.json"
    output.write_text('{"name": "old"}\n', encoding="utf-8")

    def fail_replace(self, target):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "replace", fail_replace)

    with pytest.raises(FilesystemAccessError) as excinfo:
        write_tree(tree, output, "site")

    assert excinfo.value.path == output
    assert output.read_text(encoding="utf-8") == '{"name": "old"}\n'
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tree.json"]


def test_write_tree_leaves_no_temporary_files(tmp_path, tree):
    """Test that a successful write leaves only the output file."""
    write_tree(tree, tmp_path / "tree.json", "site")

    assert [p.name for p in tmp_path.iterdir()] == ["tree.json"]


def test_render_outline(tree):
    """Test the indented outline."""
    assert render_outline(tree) == "\n".join(
        [
            "site/",
            "  blog/",
            "    Post (blog/post.html)",
            "  Home (index.html)",
        ]
    )


def test_render_outline_empty():
    """Test rendering no tree."""
    assert render_outline(None) == ""
