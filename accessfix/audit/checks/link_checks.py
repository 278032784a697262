# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Link-related accessibility checks.

This module provides checks for proper link accessibility.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity

# Compared case-insensitively against the trimmed link text
GENERIC_LINK_TEXTS = ("click here", "read more", "here", "more", "link")

PLACEHOLDER_LINK_TEXT = "Descriptive Link Text"


class LinkTextCheck(AccessibilityCheck):
    """Check for proper link text (WCAG 2.4.4)."""

    check_id = "link-text"

    def check(self) -> None:
        """
        Check if links have descriptive text.

        Only anchors with an href are links. A link is named by its text, by
        aria-label, aria-labelledby or title, or by the alt text of an image
        inside it.

        Issues:
            - link without accessible name
            - link text that is a generic phrase like "click here"
        """
        for link in self.document.find_all("a"):
            if not link.has_attr("href"):
                continue

            text = self.get_element_text(link)

            if not text:
                if self.has_aria_name(link):
                    continue
                if any(img.has_value("alt") for img in link.find_all("img")):
                    continue

                self.add_issue(
                    Severity.CRITICAL,
                    "navigation",
                    "Link without text content",
                    "Links must contain text or an aria-label so users know "
                    "where the link goes.",
                    "Add descriptive link text or use the aria-label attribute",
                    wcag="2.4.4",
                    element=link,
                    code_snippet=link.outer_html,
                    fixed_code=link.render(text=PLACEHOLDER_LINK_TEXT),
                )
                continue

            if text.lower() in GENERIC_LINK_TEXTS:
                self.add_issue(
                    Severity.WARNING,
                    "navigation",
                    "Non-descriptive link text",
                    f"Generic link text '{text}' does not describe the "
                    "destination. Link text should make sense out of context.",
                    "Use descriptive link text that makes sense out of context",
                    wcag="2.4.4",
                    element=link,
                    code_snippet=link.outer_html,
                )
