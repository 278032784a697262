# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
BeautifulSoup-backed document.

The tree is built with the standard-library ``html.parser`` builder, which
recovers from unclosed tags, lowercases tag and attribute names and records the
source position of every start tag. Markup of unchanged elements is sliced from
the source at that position, so it always appears verbatim in the input.
"""

import copy
import html
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from accessfix.dom.document import Document, Node, TagNames, normalize_names
from accessfix.dom.source_map import SourceMap


class SoupNode(Node):
    """Node wrapping a bs4 Tag."""

    def __init__(self, tag: Tag, document: "SoupDocument"):
        self._tag = tag
        self._document = document
        self._extent: Optional[Tuple[int, int, int, int]] = None
        self._located = False

    @property
    def tag(self) -> str:
        return self._tag.name

    @property
    def attrs(self) -> Dict[str, str]:
        return self._tag.attrs

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def _locate(self) -> Optional[Tuple[int, int, int, int]]:
        """(start, start_end, content_end, end) offsets of the element in the source."""
        if not self._located:
            self._located = True
            source_map = self._document.source_map
            if self._tag.sourceline is not None and self._tag.sourcepos is not None:
                start = source_map.offset_of(self._tag.sourceline, self._tag.sourcepos)
                extent = source_map.element_at(start) if start is not None else None
                if extent is not None:
                    self._extent = (start,) + extent
        return self._extent

    @property
    def outer_html(self) -> str:
        extent = self._locate()
        if extent is None:
            return str(self._tag)
        return self._document.source_map.source[extent[0]:extent[3]]

    @property
    def line_number(self) -> Optional[int]:
        return self._tag.sourceline

    @property
    def position(self) -> int:
        return len(self._tag.find_previous_siblings(self._tag.name)) + 1

    def find_all(self, names: TagNames) -> List[Node]:
        return [
            self._document.wrap(tag)
            for tag in self._tag.find_all(normalize_names(names))
        ]

    def has_ancestor(self, name: str) -> bool:
        return self._tag.find_parent(name.lower()) is not None

    def render(
        self,
        attrs: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        start_only: bool = False,
    ) -> str:
        extent = self._locate() if attrs is None else None
        if extent is not None:
            source = self._document.source_map.source
            start, start_end, _, end = extent
            start_tag = source[start:start_end]
            if start_only or start_end == end:
                return start_tag
            if text is None:
                return source[start:end]
            return f"{start_tag}{html.escape(text, quote=False)}</{self._tag.name}>"

        # Work on a copy so the parsed tree stays untouched
        clone = copy.copy(self._tag)
        if attrs is not None:
            clone.attrs = dict(attrs)
        if start_only:
            clone.clear()
        elif text is not None:
            clone.string = text

        markup = str(clone)
        if start_only:
            end_tag = f"</{clone.name}>"
            if markup.endswith(end_tag):
                markup = markup[: -len(end_tag)]
            elif markup.endswith("/>"):
                markup = markup[:-2] + ">"
        return markup


class SoupDocument(Document):
    """Document parsed into a BeautifulSoup tree."""

    backend = "tree"

    def __init__(self, source: str):
        self.source_map = SourceMap(source)
        # Keep the first of repeated attributes, like browsers do
        self._soup = BeautifulSoup(
            source,
            "html.parser",
            multi_valued_attributes=None,
            on_duplicate_attribute="ignore",
        )
        self._nodes: Dict[int, SoupNode] = {}

    def wrap(self, tag: Tag) -> SoupNode:
        """Return the cached node for a bs4 Tag."""
        node = self._nodes.get(id(tag))
        if node is None:
            node = SoupNode(tag, self)
            self._nodes[id(tag)] = node
        return node

    def find_all(self, names: TagNames) -> List[Node]:
        return [self.wrap(tag) for tag in self._soup.find_all(normalize_names(names))]

    def elements(self) -> List[Node]:
        return [self.wrap(tag) for tag in self._soup.find_all(True)]
