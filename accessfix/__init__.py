# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
AccessFix Package.

This package scans HTML for accessibility defects and suggests concrete fixes.

Main Components:
- Document loading from URLs, literal content and GitHub repositories
- HTML accessibility checks with WCAG citations
- Scoring and report generation
"""

__version__ = "0.1.0"
