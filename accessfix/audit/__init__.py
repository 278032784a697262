# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility audit module for HTML documents.

This module provides functionality for auditing HTML documents for accessibility issues
against WCAG 2.1 accessibility standards.
"""

from accessfix.audit.auditor import AccessibilityAuditor
from accessfix.audit.report_generator import generate_report
from accessfix.audit.scoring import aggregate

__all__ = ["AccessibilityAuditor", "aggregate", "generate_report"]
