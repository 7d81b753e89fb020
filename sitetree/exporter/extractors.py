"""Title extraction for site pages."""
from __future__ import annotations

import re
from typing import Optional

# Any character except a line terminator (LF, CR, LS, PS).
_LINE_CHAR = r"[^\n\r\u2028\u2029]"
_TITLE_RE = re.compile(rf"<title>({_LINE_CHAR}*?)</title>", re.IGNORECASE)


def extract_title(html: str) -> Optional[str]:
    """Extract the text of the first ``<title>`` element.

    Tag names are matched case-insensitively, the content is captured
    non-greedily and never spans a line break. Surrounding whitespace is
    trimmed.

    Args:
        html: Full page text.

    Returns:
        The title text, or None if there is no title or it is blank.
    """
    match = _TITLE_RE.search(html)
    if not match:
        return None
    title = match.group(1).strip()
    return title or None
