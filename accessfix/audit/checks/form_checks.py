# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Form-related accessibility checks.

This module provides checks for proper form accessibility.
"""

import html
import re
from typing import Dict, Set

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.dom import Node
from accessfix.utils.report_models import Severity

# Input types that take typed text and therefore need a visible label
TEXT_INPUT_TYPES = ("text", "email", "password", "tel", "number", "search", "url")

PLACEHOLDER_LABEL = "Field Label"
PLACEHOLDER_BUTTON_TEXT = "Descriptive Action"

_ID_TOKEN = re.compile(r"^[A-Za-z][\w-]*$")


class FormLabelCheck(AccessibilityCheck):
    """Check for proper form labels (WCAG 1.3.1, 3.3.2)."""

    check_id = "form-label"

    def check(self) -> None:
        """
        Check if text inputs and textareas have an accessible name.

        A control is named by a matching <label for>, an enclosing <label>,
        aria-label, aria-labelledby or title.

        Issues:
            - control without id and without any naming mechanism
            - control with an id that no <label for> references
        """
        suggested: Set[str] = set()
        ordinals: Dict[str, int] = {}

        for control in self.document.find_all(["input", "textarea"]):
            ordinals[control.tag] = ordinals.get(control.tag, 0) + 1
            if not self._is_text_control(control):
                continue
            if self.has_aria_name(control) or control.has_ancestor("label"):
                continue

            element_id = control.get("id") or ""
            if not element_id.strip():
                new_id = self._suggest_id(control, ordinals[control.tag], suggested)
                suggested.add(new_id)
                self.add_issue(
                    Severity.CRITICAL,
                    "forms",
                    "Input field without associated label",
                    "Form inputs must have an id attribute and an associated "
                    "label element, or an aria-label, so assistive technology can "
                    "announce their purpose.",
                    "Add an id attribute and a matching <label for>, or use "
                    "aria-label",
                    wcag=["1.3.1", "3.3.2"],
                    element=control,
                    code_snippet=control.outer_html,
                    fixed_code=self._label_markup(new_id)
                    + "\n"
                    + control.render(attrs=self.attrs_with(control, "id", new_id)),
                )
            elif not self.has_label_for(control):
                self.add_issue(
                    Severity.CRITICAL,
                    "forms",
                    "Input id has no matching label",
                    f"The control has id=\"{element_id}\" but no <label "
                    "for> references it and it has no aria-label, "
                    "aria-labelledby or title.",
                    f"Add <label for=\"{element_id}\"> with descriptive text "
                    "next to the control",
                    wcag=["1.3.1", "3.3.2"],
                    element=control,
                    code_snippet=control.outer_html,
                    fixed_code=self._label_markup(element_id)
                    + "\n"
                    + control.outer_html,
                )

    def _is_text_control(self, control: Node) -> bool:
        if control.tag == "textarea":
            return True
        input_type = (control.get("type") or "text").strip().lower()
        return input_type in TEXT_INPUT_TYPES

    def _suggest_id(self, control: Node, ordinal: int, taken: Set[str]) -> str:
        """Pick an id for the corrected control that is unused in the document."""
        name = (control.get("name") or "").strip()
        candidates = []
        if _ID_TOKEN.match(name):
            candidates.append(name)
        candidates.append(f"{control.tag}-{ordinal}")

        for candidate in candidates:
            if candidate not in taken and self.document.get_by_id(candidate) is None:
                return candidate

        suffix = 2
        base = candidates[-1]
        while f"{base}-{suffix}" in taken or self.document.get_by_id(f"{base}-{suffix}"):
            suffix += 1
        return f"{base}-{suffix}"

    def _label_markup(self, element_id: str) -> str:
        return f'<label for="{html.escape(element_id, quote=True)}">{PLACEHOLDER_LABEL}</label>'


class ButtonNameCheck(AccessibilityCheck):
    """Check that buttons have an accessible name (WCAG 4.1.2)."""

    check_id = "button-name"

    def check(self) -> None:
        for button in self.document.find_all("button"):
            if self.get_element_text(button) or self.has_aria_name(button):
                continue
            if any(img.has_value("alt") for img in button.find_all("img")):
                continue

            self.add_issue(
                Severity.CRITICAL,
                "forms",
                "Button without text content",
                "Buttons must contain text or an aria-label for screen readers "
                "to announce.",
                "Add descriptive text inside the button or use the aria-label "
                "attribute",
                wcag="4.1.2",
                element=button,
                code_snippet=button.outer_html,
                fixed_code=button.render(text=PLACEHOLDER_BUTTON_TEXT),
            )
