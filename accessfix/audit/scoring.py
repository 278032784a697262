# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Issue aggregation and accessibility scoring.

This module turns the issues reported by all checks into a ``ScanResult``:
issues ordered by severity, counts per severity, and a 0-100 score with a
letter grade derived purely from those counts.
"""

import math
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from accessfix.utils.config import config_manager
from accessfix.utils.logging_helper import setup_logger
from accessfix.utils.report_models import Issue, ScanResult, Severity

logger = setup_logger(__name__)

MAX_SCORE = 100

# Minimum score for each grade, checked in order
GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"


class ScoringPolicy(BaseModel):
    """Points deducted from the score per issue of each severity."""

    model_config = ConfigDict(frozen=True)

    critical_weight: float = Field(10, ge=0)
    warning_weight: float = Field(5, ge=0)
    info_weight: float = Field(2, ge=0)

    @classmethod
    def from_config(cls, options: Optional[Dict[str, Any]] = None) -> "ScoringPolicy":
        """Build the policy from the 'scoring' configuration section."""
        config = config_manager.get_config(options, section="scoring")
        return cls(
            critical_weight=config["critical_weight"],
            warning_weight=config["warning_weight"],
            info_weight=config["info_weight"],
        )


def grade_for_score(score: int) -> str:
    """Map a score to its letter grade."""
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


def calculate_score(
    critical_count: int,
    warning_count: int,
    info_count: int,
    policy: Optional[ScoringPolicy] = None,
) -> Tuple[int, str]:
    """
    Calculate the accessibility score and grade from severity counts.

    Args:
        critical_count: Number of critical issues
        warning_count: Number of warnings
        info_count: Number of informational issues
        policy: Deduction weights (defaults to 10/5/2)

    Returns:
        Tuple of (score, grade)
    """
    if critical_count == warning_count == info_count == 0:
        return MAX_SCORE, grade_for_score(MAX_SCORE)

    policy = policy or ScoringPolicy()
    score = MAX_SCORE
    score -= critical_count * policy.critical_weight
    score -= warning_count * policy.warning_weight
    score -= info_count * policy.info_weight
    score = max(0, min(MAX_SCORE, score))

    # Round half up
    rounded = int(math.floor(score + 0.5))
    return rounded, grade_for_score(rounded)


def sort_issues(issues: Iterable[Issue]) -> list:
    """Order issues by severity, most severe first, keeping detection order within a severity."""
    return sorted(issues, key=lambda issue: -issue.severity.rank)


def aggregate(
    issues: Iterable[Issue],
    policy: Optional[ScoringPolicy] = None,
    precomputed: Optional[Tuple[int, str]] = None,
) -> ScanResult:
    """
    Aggregate issues into a scan result.

    Args:
        issues: Issues from all checks, in detection order
        policy: Deduction weights for the score
        precomputed: (score, grade) already computed by an upstream caller;
            used verbatim instead of the derived values

    Returns:
        ScanResult with sorted issues, severity counts, score and grade
    """
    ordered = sort_issues(issues)

    counts = {severity: 0 for severity in Severity}
    for issue in ordered:
        counts[issue.severity] += 1

    if precomputed is not None:
        score, grade = precomputed
        logger.debug("Using precomputed score %s (%s)", score, grade)
    else:
        score, grade = calculate_score(
            counts[Severity.CRITICAL],
            counts[Severity.WARNING],
            counts[Severity.INFO],
            policy,
        )

    logger.debug(
        "Aggregated %d issues: %d critical, %d warning, %d info; score %d (%s)",
        len(ordered),
        counts[Severity.CRITICAL],
        counts[Severity.WARNING],
        counts[Severity.INFO],
        score,
        grade,
    )

    return ScanResult(
        issues=ordered,
        total_issues=len(ordered),
        critical_count=counts[Severity.CRITICAL],
        warning_count=counts[Severity.WARNING],
        info_count=counts[Severity.INFO],
        score=score,
        grade=grade,
    )
