# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Heading structure accessibility checks.

This module provides checks for proper heading structure.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity


class HeadingHierarchyCheck(AccessibilityCheck):
    """Check for proper heading hierarchy (WCAG 1.3.1)."""

    check_id = "heading-hierarchy"

    def check(self) -> None:
        """
        Check if the document has proper heading hierarchy.

        Issues:
            - no h1: headings exist but none of them is an h1
            - skipped heading level: the first place where a heading is more
              than one level deeper than the heading before it (reported once)
        """
        headings = self.document.headings()
        if not headings:
            return

        levels = [int(heading.tag[1]) for heading in headings]

        if 1 not in levels:
            self.add_issue(
                Severity.WARNING,
                "structure",
                "Missing h1 heading",
                "Pages should have a main heading (h1) that describes the page "
                "before any lower-level headings.",
                "Add an h1 element describing the page content",
                wcag="1.3.1",
                element=headings[0],
            )

        for index in range(1, len(headings)):
            previous, current = levels[index - 1], levels[index]
            if current > previous + 1:
                self.add_issue(
                    Severity.WARNING,
                    "structure",
                    "Skipped heading level",
                    f"Heading level skipped from H{previous} to H{current}. "
                    "Headings should follow sequential order so the document "
                    "outline makes sense.",
                    "Ensure headings follow sequential order (h1, h2, h3...)",
                    wcag="1.3.1",
                    element=headings[index],
                    code_snippet=headings[index].outer_html,
                )
                break
