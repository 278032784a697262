# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Parsed document interface.

Checks only talk to these two abstractions. A document can be backed by a full
BeautifulSoup tree or by the line-oriented regex scanner used when the tree
parse fails; both expose the same query capabilities.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Union

TagNames = Union[str, Iterable[str]]

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)


def normalize_names(names: TagNames) -> List[str]:
    """Return tag names as a lowercase list."""
    if isinstance(names, str):
        return [names.lower()]
    return [name.lower() for name in names]


class Node(ABC):
    """An element of a parsed document."""

    @property
    @abstractmethod
    def tag(self) -> str:
        """Lowercase tag name."""

    @property
    @abstractmethod
    def attrs(self) -> Dict[str, str]:
        """Attribute map in source order. Callers must not mutate it."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Concatenated text content of the element and its descendants."""

    @property
    @abstractmethod
    def outer_html(self) -> str:
        """Markup of the element including its content."""

    @property
    @abstractmethod
    def line_number(self) -> Optional[int]:
        """1-based source line of the start tag, when known."""

    @property
    @abstractmethod
    def position(self) -> int:
        """1-based ordinal among siblings sharing this tag name."""

    @abstractmethod
    def find_all(self, names: TagNames) -> List["Node"]:
        """Descendant elements matching any of the tag names, in document order."""

    @abstractmethod
    def has_ancestor(self, name: str) -> bool:
        """Whether an enclosing element has the given tag name."""

    @abstractmethod
    def render(
        self,
        attrs: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        start_only: bool = False,
    ) -> str:
        """
        Serialize the element, optionally with replaced attributes or content.

        Args:
            attrs: Attribute map to use instead of the element's own
            text: Text to use instead of the element's content
            start_only: Return only the start tag

        Returns:
            Standalone markup fragment
        """

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attrs.get(name.lower(), default)

    def has_attr(self, name: str) -> bool:
        return name.lower() in self.attrs

    def has_value(self, name: str) -> bool:
        """Whether the attribute is present with non-blank content."""
        value = self.get(name)
        return bool(value and value.strip())

    @property
    def start_tag(self) -> str:
        return self.render(start_only=True)

    def contains(self, name: str) -> bool:
        return bool(self.find_all(name))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag} line={self.line_number}>"


class Document(ABC):
    """A parsed HTML document. Immutable for the lifetime of a scan."""

    #: Name of the parsing strategy, reported in logs.
    backend: str = "abstract"

    @abstractmethod
    def find_all(self, names: TagNames) -> List[Node]:
        """Elements matching any of the tag names, in document order."""

    @abstractmethod
    def elements(self) -> List[Node]:
        """All elements in document order."""

    def find_by_attr(
        self, name: str, value: Optional[str] = None, tag: Optional[str] = None
    ) -> List[Node]:
        """
        Elements carrying an attribute, optionally with an exact value.

        Args:
            name: Attribute name
            value: Required attribute value, or None for presence only
            tag: Restrict to this tag name

        Returns:
            Matching elements in document order
        """
        candidates = self.find_all(tag) if tag else self.elements()
        name = name.lower()
        matches = []
        for node in candidates:
            if name not in node.attrs:
                continue
            if value is not None and node.attrs[name] != value:
                continue
            matches.append(node)
        return matches

    def get_by_id(self, element_id: str) -> Optional[Node]:
        """First element whose id equals element_id."""
        for node in self.find_by_attr("id", element_id):
            return node
        return None

    def headings(self) -> List[Node]:
        return self.find_all(HEADING_TAGS)
