# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Selector generation for reported elements.
"""

from accessfix.dom.document import Node


def generate_selector(node: Node) -> str:
    """
    Generate a CSS selector locating an element within its document.

    Uses ``#id`` when the element carries a non-empty id, otherwise
    ``tag:nth-of-type(n)`` with n the 1-based ordinal among same-tag siblings.

    Args:
        node: The element to locate

    Returns:
        CSS selector string
    """
    element_id = (node.get("id") or "").strip()
    if element_id:
        return f"#{element_id}"
    return f"{node.tag}:nth-of-type({node.position})"
