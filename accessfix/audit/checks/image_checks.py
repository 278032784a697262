# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Image accessibility checks.

This module provides checks for proper image accessibility.
"""

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.utils.report_models import Severity

PLACEHOLDER_ALT = "Description of image"


class AltTextCheck(AccessibilityCheck):
    """Check for proper alt text on images (WCAG 1.1.1)."""

    check_id = "image-alt"

    def check(self) -> None:
        """
        Check if images have appropriate alt text.

        Issues:
            - missing alt: the image has no alt attribute at all
            - empty alt: alt="" on an image with no role and no aria-hidden="true"
        """
        for img in self.document.find_all("img"):
            if not img.has_attr("alt"):
                self.add_issue(
                    Severity.CRITICAL,
                    "images",
                    "Image missing alt attribute",
                    "All images must have an alt attribute for screen readers. "
                    "Decorative images should use alt=\"\".",
                    "Add an alt attribute with descriptive text, or alt=\"\" "
                    "for decorative images",
                    wcag="1.1.1",
                    element=img,
                    code_snippet=img.outer_html,
                    fixed_code=img.render(
                        attrs=self.attrs_with(img, "alt", PLACEHOLDER_ALT)
                    ),
                )
            elif not img.get("alt").strip() and not self._is_decorative(img):
                self.add_issue(
                    Severity.WARNING,
                    "images",
                    "Image has empty alt attribute",
                    "Empty alt attributes should only be used for decorative "
                    "images. If this image conveys information, add descriptive "
                    "alt text.",
                    "Replace the empty alt with descriptive text if the image is "
                    "meaningful, or mark it decorative with role=\"presentation\"",
                    wcag="1.1.1",
                    element=img,
                    code_snippet=img.outer_html,
                )

    def _is_decorative(self, img) -> bool:
        return img.has_attr("role") or img.get("aria-hidden") == "true"
