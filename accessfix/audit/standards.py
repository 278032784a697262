# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
WCAG standards and criteria information.

This module provides information about the WCAG criteria cited by the checks.
"""

from typing import Iterable, Union

WCAG_VERSION = "2.1"

# WCAG criteria information
WCAG_CRITERIA = {
    "1.1.1": {
        "name": "Non-text Content",
        "level": "A",
        "description": "All non-text content that is presented to the user has a text alternative that serves the equivalent purpose.",
    },
    "1.3.1": {
        "name": "Info and Relationships",
        "level": "A",
        "description": "Information, structure, and relationships conveyed through presentation can be programmatically determined.",
    },
    "2.4.4": {
        "name": "Link Purpose (In Context)",
        "level": "A",
        "description": "The purpose of each link can be determined from the link text alone or from the link text together with its programmatically determined link context.",
    },
    "3.1.1": {
        "name": "Language of Page",
        "level": "A",
        "description": "The default human language of each Web page can be programmatically determined.",
    },
    "3.3.2": {
        "name": "Labels or Instructions",
        "level": "A",
        "description": "Labels or instructions are provided when content requires user input.",
    },
    "4.1.1": {
        "name": "Parsing",
        "level": "A",
        "description": "In content implemented using markup languages, elements have complete start and end tags.",
    },
    "4.1.2": {
        "name": "Name, Role, Value",
        "level": "A",
        "description": "For all user interface components, the name and role can be programmatically determined.",
    },
}

_LEVEL_ORDER = {"A": 1, "AA": 2, "AAA": 3}


def get_criterion_info(criterion_id: str) -> dict:
    """
    Get information about a WCAG criterion.

    Args:
        criterion_id: WCAG criterion ID (e.g., '1.1.1')

    Returns:
        Dictionary with criterion information
    """
    return WCAG_CRITERIA.get(
        criterion_id,
        {
            "name": "Unknown Criterion",
            "level": "Unknown",
            "description": "No description available",
        },
    )


def format_wcag_citation(criteria: Union[str, Iterable[str]]) -> str:
    """
    Build the citation string attached to issues.

    Several criteria share one prefix carrying the highest conformance level
    among them, e.g. ``WCAG 2.1 Level A - 1.3.1 Info and Relationships,
    3.3.2 Labels or Instructions``.

    Args:
        criteria: One criterion ID or several

    Returns:
        Citation string
    """
    if isinstance(criteria, str):
        criteria = [criteria]
    infos = [(criterion, get_criterion_info(criterion)) for criterion in criteria]
    level = max(
        (info["level"] for _, info in infos),
        key=lambda lvl: _LEVEL_ORDER.get(lvl, 0),
    )
    cited = ", ".join(f"{criterion} {info['name']}" for criterion, info in infos)
    return f"WCAG {WCAG_VERSION} Level {level} - {cited}"
