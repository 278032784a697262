# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document language check.

This module provides a standalone check for document language.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.logging_helper import setup_logger
from accessfix.utils.report_models import Severity

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_LANGUAGE = "en"


class DocumentLanguageCheck(AccessibilityCheck):
    """Check that the document declares its language (WCAG 3.1.1)."""

    check_id = "document-language"

    def check(self) -> None:
        """
        Check if the html element declares a non-empty lang attribute.

        Documents without an html element (fragments) are not checked.
        """
        for html_tag in self.document.find_all("html"):
            if html_tag.has_value("lang"):
                logger.debug("HTML tag has lang attribute: '%s'", html_tag.get("lang"))
                continue

            logger.debug("HTML tag missing lang attribute")
            self.add_issue(
                Severity.CRITICAL,
                "structure",
                "Missing lang attribute on html element",
                "The html element must have a lang attribute to help screen "
                "readers pronounce content correctly.",
                "Add lang=\"en\" or the appropriate language code to the html element",
                wcag="3.1.1",
                element=html_tag,
                code_snippet=html_tag.start_tag,
                fixed_code=html_tag.render(
                    attrs=self.attrs_with(html_tag, "lang", DEFAULT_LANGUAGE),
                    start_only=True,
                ),
            )
