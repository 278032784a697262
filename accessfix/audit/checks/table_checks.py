# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Table-related accessibility checks.

This module provides checks for proper table accessibility.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity


class TableHeaderCheck(AccessibilityCheck):
    """Check for proper table headers (WCAG 1.3.1)."""

    check_id = "table-header"

    def check(self) -> None:
        for table in self.document.find_all("table"):
            if table.contains("th"):
                continue

            self.add_issue(
                Severity.WARNING,
                "tables",
                "Table missing header cells",
                "Data tables should use <th> elements for headers to establish "
                "relationships between data cells.",
                "Use <th> elements for table headers with a scope attribute",
                wcag="1.3.1",
                element=table,
            )


class TableCaptionCheck(AccessibilityCheck):
    """Check that tables carry a caption (WCAG 1.3.1)."""

    check_id = "table-caption"

    def check(self) -> None:
        for table in self.document.find_all("table"):
            if table.contains("caption"):
                continue

            self.add_issue(
                Severity.INFO,
                "tables",
                "Table missing caption",
                "A <caption> identifies the table and summarizes its purpose "
                "for screen reader users.",
                "Add a <caption> element as the first child of the table",
                wcag="1.3.1",
                element=table,
            )
