# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML Accessibility Auditor.

This module runs the accessibility checks over parsed HTML documents and
collects their issues. A check that fails is logged and skipped; the remaining
checks still run.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from accessfix.audit.base_check import AccessibilityCheck
from accessfix.audit.checks import DEFAULT_CHECKS
from accessfix.audit.scoring import ScoringPolicy, aggregate
from accessfix.dom import Document, parse_document
from accessfix.utils.config import config_manager
from accessfix.utils.logging_helper import (
    RuleEvaluationError,
    log_exception,
    setup_logger,
)
from accessfix.utils.report_models import Issue, ScanResult, SourceDocument

# Set up module-level logger
logger = setup_logger(__name__)


class AccessibilityAuditor:
    """Class for auditing HTML documents for accessibility issues."""

    def __init__(
        self,
        options: Optional[Dict[str, Any]] = None,
        checks: Optional[Sequence[Type[AccessibilityCheck]]] = None,
        policy: Optional[ScoringPolicy] = None,
    ):
        """
        Initialize the accessibility auditor.

        Args:
            options: Scan options overriding the 'scan' configuration section:
                - parser_backend (str): 'tree' (default) or 'text'.
                - disabled_checks (list): Check ids to skip.
                - max_workers (int): Files audited concurrently in multi-file scans.
            checks: Check classes to run instead of the default set.
            policy: Score weights; defaults to the 'scoring' configuration section.
        """
        self.options = config_manager.get_config(options, section="scan")
        self.policy = policy or ScoringPolicy.from_config()

        disabled = set(self.options.get("disabled_checks") or [])
        self.checks = [
            check for check in (checks or DEFAULT_CHECKS) if check.check_id not in disabled
        ]
        if disabled:
            logger.debug("Disabled checks: %s", ", ".join(sorted(disabled)))

        # Failures of individual checks during the last audit
        self.rule_errors: List[RuleEvaluationError] = []

    def parse(self, html: Union[str, bytes]) -> Document:
        return parse_document(html, backend=self.options.get("parser_backend", "tree"))

    def audit_document(
        self, document: Document, file_path: Optional[str] = None
    ) -> List[Issue]:
        """
        Run every enabled check against one parsed document.

        Args:
            document: Parsed document
            file_path: Source file attached to each issue, in repository scans

        Returns:
            Issues in detection order (check order, then document order)
        """
        issues, errors = self._run_checks(document, file_path)
        self.rule_errors.extend(errors)
        return issues

    def _run_checks(self, document: Document, file_path: Optional[str]):
        issues: List[Issue] = []
        errors: List[RuleEvaluationError] = []

        logger.debug(
            "Running %d checks on %s (%s parser)",
            len(self.checks),
            file_path or "document",
            document.backend,
        )

        for check_class in self.checks:
            try:
                found = check_class(document, file_path).run()
            except Exception as e:
                error = RuleEvaluationError(check_class.__name__, e)
                log_exception(
                    logger,
                    e,
                    f"Error running check {check_class.__name__}, skipping it",
                    level=logging.WARNING,
                )
                errors.append(error)
                continue

            logger.debug("Completed check: %s, issues: %d", check_class.__name__, len(found))
            issues.extend(found)

        return issues, errors

    def audit(
        self, html: Union[str, bytes], file_path: Optional[str] = None
    ) -> ScanResult:
        """
        Parse and audit a single HTML document.

        Args:
            html: HTML markup
            file_path: Optional source file to attribute issues to

        Returns:
            Aggregated scan result

        Raises:
            ParseError: If the content cannot be parsed at all
        """
        self.rule_errors = []
        document = self.parse(html)
        issues = self.audit_document(document, file_path)
        logger.info("Audit completed. Total issues found: %d", len(issues))
        return aggregate(issues, self.policy)

    def audit_sources(self, sources: Sequence[SourceDocument]) -> ScanResult:
        """
        Audit several documents and aggregate their issues into one result.

        Files are independent; with max_workers > 1 they are audited
        concurrently, and their issues are concatenated in input order.

        Args:
            sources: Documents to audit

        Returns:
            Aggregated scan result

        Raises:
            ParseError: If any document cannot be parsed at all
        """
        self.rule_errors = []
        workers = max(1, int(self.options.get("max_workers") or 1))

        if workers > 1 and len(sources) > 1:
            logger.info("Auditing %d files with %d workers", len(sources), workers)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(self._audit_source, sources))
        else:
            results = [self._audit_source(source) for source in sources]

        issues: List[Issue] = []
        for file_issues, errors in results:
            issues.extend(file_issues)
            self.rule_errors.extend(errors)

        logger.info(
            "Audit completed for %d files. Total issues found: %d",
            len(sources),
            len(issues),
        )
        return aggregate(issues, self.policy)

    def _audit_source(self, source: SourceDocument):
        logger.debug("Processing HTML file: %s", source.file_path or "(inline)")
        document = self.parse(source.html)
        return self._run_checks(document, source.file_path)
