# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Regex-backed document.

Degraded parsing strategy used when a full tree parse is not available. Every
element is located directly in the raw source through a ``SourceMap``, so line
numbers and markup come straight from character offsets.
"""

import html
import re
from typing import Dict, List, Optional

from accessfix.dom.document import (
    VOID_ELEMENTS,
    Document,
    Node,
    TagNames,
    normalize_names,
)
from accessfix.dom.source_map import START_TAG_RE, SourceMap

_ATTR_RE = re.compile(
    r"([^\s\"'>/=]+)(?:\s*=\s*(?:\"([^\"]*)\"|'([^']*)'|([^\s\"'=<>`]+)))?"
)
_ANY_TAG_RE = re.compile(r"<[^>]*>")


def _parse_attrs(attr_text: str) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for match in _ATTR_RE.finditer(attr_text):
        name = match.group(1).lower()
        if name in attrs:
            # First occurrence wins, as in browsers
            continue
        value = next(
            (group for group in match.group(2, 3, 4) if group is not None), ""
        )
        attrs[name] = html.unescape(value)
    return attrs


def render_start_tag(name: str, attrs: Dict[str, str]) -> str:
    """Serialize a start tag from a name and attribute map."""
    parts = [name]
    for attr_name, value in attrs.items():
        parts.append(f'{attr_name}="{html.escape(value or "", quote=True)}"')
    return "<" + " ".join(parts) + ">"


class TextNode(Node):
    """Element located by regex in raw text."""

    def __init__(
        self,
        document: "TextDocument",
        name: str,
        attrs: Dict[str, str],
        start: int,
        start_end: int,
        content_end: int,
        end: int,
    ):
        self._document = document
        self._name = name
        self._attrs = attrs
        self.start = start
        self.start_end = start_end
        self.content_end = content_end
        self.end = end
        self.parent: Optional["TextNode"] = None
        self.ordinal = 1

    @property
    def tag(self) -> str:
        return self._name

    @property
    def attrs(self) -> Dict[str, str]:
        return self._attrs

    @property
    def text(self) -> str:
        inner = self._document.masked[self.start_end:self.content_end]
        return html.unescape(_ANY_TAG_RE.sub("", inner))

    @property
    def outer_html(self) -> str:
        return self._document.source[self.start:self.end]

    @property
    def line_number(self) -> Optional[int]:
        return self._document.line_of(self.start)

    @property
    def position(self) -> int:
        return self.ordinal

    def find_all(self, names: TagNames) -> List[Node]:
        wanted = normalize_names(names)
        return [
            node
            for node in self._document.nodes
            if self.start < node.start < self.end and node.tag in wanted
        ]

    def has_ancestor(self, name: str) -> bool:
        parent = self.parent
        while parent is not None:
            if parent.tag == name.lower():
                return True
            parent = parent.parent
        return False

    def render(
        self,
        attrs: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        start_only: bool = False,
    ) -> str:
        source = self._document.source
        if attrs is None:
            start_tag = source[self.start:self.start_end]
        else:
            start_tag = render_start_tag(self._name, attrs)

        if start_only or self._name in VOID_ELEMENTS:
            return start_tag
        if attrs is None and text is None:
            return self.outer_html

        if text is not None:
            content = html.escape(text, quote=False)
        else:
            content = source[self.start_end:self.content_end]
        return f"{start_tag}{content}</{self._name}>"


class TextDocument(Document):
    """Document scanned with regular expressions over the raw source."""

    backend = "text"

    def __init__(self, source: str):
        self.source_map = SourceMap(source)
        self.source = source
        self.masked = self.source_map.masked
        self.nodes = self._scan()

    def line_of(self, offset: int) -> int:
        return self.source_map.line_of(offset)

    def _scan(self) -> List[TextNode]:
        nodes: List[TextNode] = []
        for match in START_TAG_RE.finditer(self.masked):
            name = match.group(1).lower()
            start, start_end = match.span()
            if name in VOID_ELEMENTS or match.group(3) == "/":
                content_end = end = start_end
            else:
                content_end, end = self.source_map.find_close(name, start_end)
            nodes.append(
                TextNode(
                    self,
                    name,
                    _parse_attrs(match.group(2)),
                    start,
                    start_end,
                    content_end,
                    end,
                )
            )
        self._link_parents(nodes)
        return nodes

    @staticmethod
    def _link_parents(nodes: List[TextNode]) -> None:
        stack: List[TextNode] = []
        counters: Dict[tuple, int] = {}
        for node in nodes:
            while stack and stack[-1].end <= node.start:
                stack.pop()
            node.parent = stack[-1] if stack else None
            key = (id(node.parent), node.tag)
            counters[key] = counters.get(key, 0) + 1
            node.ordinal = counters[key]
            if node.end > node.start_end:
                stack.append(node)

    def find_all(self, names: TagNames) -> List[Node]:
        wanted = normalize_names(names)
        return [node for node in self.nodes if node.tag in wanted]

    def elements(self) -> List[Node]:
        return list(self.nodes)
