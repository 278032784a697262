# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Offsets into the raw HTML source.

Both document backends use this to recover literal markup: start tags are
matched in the raw text, element extents are found by counting nested open and
close tags of the same name, and offsets map to 1-based line numbers. Comments
and script/style bodies are masked out first so their content is never mistaken
for markup.
"""

import bisect
import re
from typing import List, Optional, Tuple

from accessfix.dom.document import VOID_ELEMENTS

_COMMENT_RE = re.compile(r"<!--.*?(?:-->|$)", re.S)
_RAW_TEXT_RE = re.compile(r"<(script|style)\b[^>]*>(.*?)</\1\s*>", re.S | re.I)

START_TAG_RE = re.compile(
    r"<([a-zA-Z][a-zA-Z0-9:-]*)"
    r"((?:\s+[^\s\"'>/=]+(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'=<>`]+))?)*)"
    r"\s*(/?)>"
)


def _mask(start: int, end: int, chars: List[str]) -> None:
    for i in range(start, end):
        if chars[i] != "\n":
            chars[i] = " "


class SourceMap:
    """Raw source plus a masked copy with the same offsets."""

    def __init__(self, source: str):
        self.source = source
        chars = list(source)
        for match in _COMMENT_RE.finditer(source):
            _mask(match.start(), match.end(), chars)
        for match in _RAW_TEXT_RE.finditer(source):
            _mask(match.start(2), match.end(2), chars)
        self.masked = "".join(chars)
        self._line_starts = [0] + [
            i + 1 for i, char in enumerate(source) if char == "\n"
        ]

    def line_of(self, offset: int) -> int:
        return bisect.bisect_right(self._line_starts, offset)

    def offset_of(self, line: int, column: int) -> Optional[int]:
        """Offset of a 1-based line and 0-based column, if inside the source."""
        if line < 1 or line > len(self._line_starts):
            return None
        offset = self._line_starts[line - 1] + column
        return offset if offset <= len(self.source) else None

    def find_close(self, name: str, offset: int) -> Tuple[int, int]:
        """
        Locate the close tag matching an element opened before offset.

        Nested elements of the same name are counted. Elements that are never
        closed run to the end of the source.

        Returns:
            (content_end, end) offsets
        """
        pattern = re.compile(r"<(/?)%s\b[^>]*?(/?)>" % re.escape(name), re.I)
        depth = 1
        for match in pattern.finditer(self.masked, offset):
            if match.group(1):
                depth -= 1
                if depth == 0:
                    return match.start(), match.end()
            elif not match.group(2):
                depth += 1
        return len(self.masked), len(self.masked)

    def element_at(self, offset: int) -> Optional[Tuple[int, int, int]]:
        """
        Extent of the element whose start tag begins at offset.

        Returns:
            (start_end, content_end, end) offsets, or None when no start tag
            begins there
        """
        match = START_TAG_RE.match(self.masked, offset)
        if match is None:
            return None
        start_end = match.end()
        name = match.group(1).lower()
        if name in VOID_ELEMENTS or match.group(3) == "/":
            return start_end, start_end, start_end
        content_end, end = self.find_close(name, start_end)
        return start_end, content_end, end
