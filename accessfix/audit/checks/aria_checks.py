# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
ARIA usage checks.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity

# Elements whose implicit role makes an explicit role of the same name redundant
IMPLICIT_ROLES = {
    "button": "button",
    "nav": "navigation",
    "main": "main",
    "aside": "complementary",
    "footer": "contentinfo",
    "header": "banner",
}

FORM_CONTROL_TAGS = ("input", "select", "textarea")


class RedundantRoleCheck(AccessibilityCheck):
    """Check for role attributes that repeat the element's implicit role."""

    check_id = "redundant-role"

    def check(self) -> None:
        for element in self.document.find_by_attr("role"):
            implicit_role = IMPLICIT_ROLES.get(element.tag)
            if not implicit_role:
                continue
            if element.get("role").strip().lower() != implicit_role:
                continue

            self.add_issue(
                Severity.INFO,
                "aria",
                "Redundant ARIA role",
                f"The <{element.tag}> element already has the implicit role "
                f"\"{implicit_role}\"; repeating it adds noise without changing "
                "semantics.",
                "Remove the role attribute",
                wcag="4.1.2",
                element=element,
                code_snippet=element.start_tag,
            )


class AriaRequiredNameCheck(AccessibilityCheck):
    """Check that aria-required fields have an accessible name (WCAG 3.3.2)."""

    check_id = "aria-required-name"

    def check(self) -> None:
        for element in self.document.find_by_attr("aria-required"):
            if element.get("aria-required").strip().lower() != "true":
                continue
            if self.has_accessible_name(element):
                continue

            self.add_issue(
                Severity.WARNING,
                "aria",
                "Required field without accessible name",
                "The element is marked aria-required=\"true\" but has no label, "
                "aria-label, aria-labelledby or title, so users are not told "
                "what is required.",
                "Add a <label for> or an aria-label that names the required field",
                wcag="3.3.2",
                element=element,
                code_snippet=(
                    element.outer_html
                    if element.tag in FORM_CONTROL_TAGS
                    else element.start_tag
                ),
            )
