# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document structure accessibility checks.
"""

from typing import Set

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity

PLACEHOLDER_IFRAME_TITLE = "Description of iframe content"


class IframeTitleCheck(AccessibilityCheck):
    """Check that iframes are titled (WCAG 4.1.2)."""

    check_id = "iframe-title"

    def check(self) -> None:
        for iframe in self.document.find_all("iframe"):
            if iframe.has_value("title") or iframe.has_value("aria-label"):
                continue

            self.add_issue(
                Severity.CRITICAL,
                "structure",
                "Iframe missing title attribute",
                "Iframes must have a title attribute that describes their "
                "content for screen reader users.",
                "Add a title attribute with descriptive text",
                wcag="4.1.2",
                element=iframe,
                code_snippet=iframe.outer_html,
                fixed_code=iframe.render(
                    attrs=self.attrs_with(iframe, "title", PLACEHOLDER_IFRAME_TITLE)
                ),
            )


class DuplicateIdCheck(AccessibilityCheck):
    """Check that id values are unique (WCAG 4.1.1)."""

    check_id = "duplicate-id"

    def check(self) -> None:
        """
        Report every element reusing an id seen earlier in the document.

        The first element carrying a value is its owner; each later one is an
        issue.
        """
        seen: Set[str] = set()
        for element in self.document.find_by_attr("id"):
            element_id = element.get("id")
            if not element_id:
                continue
            if element_id not in seen:
                seen.add(element_id)
                continue

            self.add_issue(
                Severity.CRITICAL,
                "structure",
                "Duplicate id attribute",
                f"The id \"{element_id}\" is used by more than one element. "
                "Assistive technology relies on unique ids to resolve labels "
                "and relationships.",
                "Give each element a unique id and update references to it",
                wcag="4.1.1",
                element=element,
                code_snippet=element.start_tag,
            )
