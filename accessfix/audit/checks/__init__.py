# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0


"""
Accessibility checks package.

This package contains all the specific accessibility checks that can be performed.
"""

from accessfix.audit.checks.document_language_check import DocumentLanguageCheck
from accessfix.audit.checks.image_checks import AltTextCheck
from accessfix.audit.checks.form_checks import FormLabelCheck, ButtonNameCheck
from accessfix.audit.checks.link_checks import LinkTextCheck
from accessfix.audit.checks.heading_checks import HeadingHierarchyCheck
from accessfix.audit.checks.structure_checks import IframeTitleCheck, DuplicateIdCheck
from accessfix.audit.checks.table_checks import TableHeaderCheck, TableCaptionCheck
from accessfix.audit.checks.aria_checks import RedundantRoleCheck, AriaRequiredNameCheck

# Evaluation order; also the tie-break order of issues with equal severity
DEFAULT_CHECKS = [
    DocumentLanguageCheck,
    AltTextCheck,
    FormLabelCheck,
    ButtonNameCheck,
    LinkTextCheck,
    HeadingHierarchyCheck,
    IframeTitleCheck,
    TableHeaderCheck,
    TableCaptionCheck,
    DuplicateIdCheck,
    RedundantRoleCheck,
    AriaRequiredNameCheck,
]

__all__ = [
    "DEFAULT_CHECKS",
    "DocumentLanguageCheck",
    "AltTextCheck",
    "FormLabelCheck",
    "ButtonNameCheck",
    "LinkTextCheck",
    "HeadingHierarchyCheck",
    "IframeTitleCheck",
    "DuplicateIdCheck",
    "TableHeaderCheck",
    "TableCaptionCheck",
    "RedundantRoleCheck",
    "AriaRequiredNameCheck",
]
