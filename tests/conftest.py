"""Pytest configuration and fixtures for sitetree tests."""
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

INCLUDE_META = '<meta name="sitemap" content="include">'
EXCLUDE_META = '<meta name="sitemap" content="exclude">'


def make_page(title: Optional[str] = None, meta: str = "") -> str:
    """Build a minimal HTML page with an optional title and head markup."""
    head = []
    if meta:
        head.append(f"  {meta}")
    if title is not None:
        head.append(f"  <title>{title}</title>")
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        + "\n".join(head)
        + "\n</head>\n<body></body>\n</html>\n"
    )


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def write_file(site: Path) -> Callable[[str, str], Path]:
    """Write a file below the project root, creating parent directories."""
    def _write(relative: str, content: str = "") -> Path:
        path = site / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_page(write_file) -> Callable[..., Path]:
    """Write an HTML page marked include, exclude, or left unmarked."""
    def _write(relative: str, title: Optional[str] = None, marker: Optional[str] = "include") -> Path:
        meta = {"include": INCLUDE_META, "exclude": EXCLUDE_META, None: ""}[marker]
        return write_file(relative, make_page(title=title, meta=meta))

    return _write
