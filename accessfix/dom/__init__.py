# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML parser adapter.

Turns an HTML string into a read-only ``Document``. The BeautifulSoup tree is
the default; the regex scanner takes over when the tree parse fails or when it
is requested explicitly.
"""

import logging
from typing import Union

from accessfix.dom.document import Document, Node, HEADING_TAGS
from accessfix.dom.selector import generate_selector
from accessfix.dom.soup_document import SoupDocument
from accessfix.dom.text_document import TextDocument
from accessfix.utils.logging_helper import ParseError, log_exception, setup_logger

logger = setup_logger(__name__)

PARSER_BACKENDS = ("tree", "text")


def _as_text(html: Union[str, bytes]) -> str:
    if isinstance(html, bytes):
        try:
            return html.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Content is not valid UTF-8 text: {e}") from e
    if not isinstance(html, str):
        raise ParseError(
            f"Content must be text to be parsed as HTML, got {type(html).__name__}"
        )
    return html


def parse_document(html: Union[str, bytes], backend: str = "tree") -> Document:
    """
    Parse HTML into a document.

    Args:
        html: HTML markup as text or UTF-8 bytes
        backend: 'tree' for BeautifulSoup with regex fallback, 'text' for regex only

    Returns:
        Parsed document

    Raises:
        ParseError: If the content cannot be interpreted as markup at all
    """
    if backend not in PARSER_BACKENDS:
        raise ParseError(
            f"Unknown parser backend '{backend}', expected one of {', '.join(PARSER_BACKENDS)}"
        )

    text = _as_text(html)

    if backend == "tree":
        try:
            return SoupDocument(text)
        except Exception as e:
            log_exception(
                logger,
                e,
                "Tree parse failed, falling back to text scanning",
                level=logging.WARNING,
                include_traceback=False,
            )

    try:
        return TextDocument(text)
    except Exception as e:
        raise ParseError(f"Content could not be interpreted as HTML: {e}") from e


__all__ = [
    "Document",
    "Node",
    "HEADING_TAGS",
    "SoupDocument",
    "TextDocument",
    "generate_selector",
    "parse_document",
    "PARSER_BACKENDS",
]
