from __future__ import annotations

import re

from .fields import NAME_LABEL, label_pattern

# A block ends at a "---" delimiter line, or at a blank line directly followed
# by the next "Place Name:" label.
_BLOCK_SPLIT_RE = re.compile(
    rf"^[ \t]*-{{3,}}[ \t]*$|\n[ \t]*\n(?={label_pattern(NAME_LABEL)})",
    re.IGNORECASE | re.MULTILINE,
)


def segment_blocks(text: str) -> list[str]:
    """
    Split the provider answer into candidate place blocks, in text order.

    Every segment is returned, including preamble and empty ones, because
    callers pair places with citation links by block position.
    """
    if not text or not text.strip():
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return _BLOCK_SPLIT_RE.split(normalized)
