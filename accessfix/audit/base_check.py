# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Base classes for accessibility checks.

This module provides the foundation for all accessibility checks in the system.
"""

from typing import Dict, Iterable, List, Optional, Union

from accessfix.audit.standards import format_wcag_citation
from accessfix.dom import Document, Node, generate_selector
from accessfix.utils.report_models import Issue, Severity

# Attributes that give an element an accessible name on their own
ARIA_NAME_ATTRIBUTES = ("aria-label", "aria-labelledby", "title")


class AccessibilityCheck:
    """
    Base class for all accessibility checks.

    A check reads a parsed document and reports issues through ``add_issue``.
    It never modifies the document, and ``run`` starts from an empty issue list
    every time, so one instance can be evaluated repeatedly.
    """

    #: Stable identifier used to enable or disable the check
    check_id: str = ""

    def __init__(self, document: Document, file_path: Optional[str] = None):
        """
        Initialize the accessibility check.

        Args:
            document: Parsed HTML document
            file_path: Source file of the document, in repository scans
        """
        self.document = document
        self.file_path = file_path
        self._issues: List[Issue] = []

    def run(self) -> List[Issue]:
        """Evaluate the check and return the issues it found, in detection order."""
        self._issues = []
        self.check()
        return list(self._issues)

    def check(self) -> None:
        """
        Perform the accessibility check.

        This method must be implemented by all subclasses.
        """
        raise NotImplementedError("Subclasses must implement check()")

    def add_issue(
        self,
        severity: Severity,
        category: str,
        title: str,
        description: str,
        recommended_fix: str,
        wcag: Union[str, Iterable[str], None] = None,
        element: Optional[Node] = None,
        code_snippet: Optional[str] = None,
        fixed_code: Optional[str] = None,
    ) -> None:
        """
        Record an issue.

        Args:
            severity: Issue severity
            category: Short grouping label (images, forms, ...)
            title: Short defect name
            description: What is wrong and why it matters
            recommended_fix: Remediation instructions
            wcag: WCAG criterion ID(s) the issue violates
            element: Offending element; provides selector and line number
            code_snippet: Markup showing the violation
            fixed_code: Markup showing a corrected version
        """
        self._issues.append(
            Issue(
                severity=severity,
                category=category,
                title=title,
                description=description,
                selector=generate_selector(element) if element is not None else None,
                line_number=element.line_number if element is not None else None,
                recommended_fix=recommended_fix,
                code_snippet=code_snippet,
                fixed_code=fixed_code,
                wcag_criteria=format_wcag_citation(wcag) if wcag else None,
                file_path=self.file_path,
            )
        )

    def get_element_text(self, element: Node) -> str:
        return element.text.strip()

    def attrs_with(self, element: Node, name: str, value: str) -> Dict[str, str]:
        """Copy of the element's attributes with name set to value, placed first."""
        attrs = {name: value}
        attrs.update((key, val) for key, val in element.attrs.items() if key != name)
        return attrs

    def has_aria_name(self, element: Node) -> bool:
        """Whether aria-label, aria-labelledby or title names the element."""
        return any(element.has_value(attr) for attr in ARIA_NAME_ATTRIBUTES)

    def has_label_for(self, element: Node) -> bool:
        """Whether a <label for> points at the element's id."""
        element_id = element.get("id")
        if not element_id:
            return False
        return bool(self.document.find_by_attr("for", element_id, tag="label"))

    def has_accessible_name(self, element: Node) -> bool:
        """Whether a label, aria attribute or title names a form control."""
        return (
            self.has_aria_name(element)
            or self.has_label_for(element)
            or element.has_ancestor("label")
        )
