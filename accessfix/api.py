# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
AccessFix API.

This module provides the primary entry points for the accessfix package:
auditing HTML content directly, auditing several documents at once, and
running a complete scan from a URL, literal content or a GitHub repository.
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from accessfix.audit.auditor import AccessibilityAuditor
from accessfix.audit.report_generator import ReportEmitter, Sink
from accessfix.audit.scoring import ScoringPolicy, aggregate
from accessfix.loader import RepositoryFile, load_sources
from accessfix.utils.config import validate_options
from accessfix.utils.logging_helper import ScanTimeoutError, setup_logger
from accessfix.utils.report_models import ScanResult, SourceDocument

# Set up module-level logger
logger = setup_logger(__name__)

# Expected types of the options accepted by the entry points
OPTION_TYPES = {
    "parser_backend": str,
    "disabled_checks": (list, tuple),
    "max_workers": int,
    "timeout": (int, float),
    "fetch_timeout": (int, float),
    "github_token": str,
    "github_ref": str,
    "critical_weight": (int, float),
    "warning_weight": (int, float),
    "info_weight": (int, float),
}

SCORING_OPTIONS = ("critical_weight", "warning_weight", "info_weight")


def _build_auditor(options: Optional[Dict[str, Any]]) -> AccessibilityAuditor:
    options = dict(options or {})
    validate_options(options, OPTION_TYPES)

    scoring = {key: options.pop(key) for key in SCORING_OPTIONS if key in options}
    return AccessibilityAuditor(
        options=options, policy=ScoringPolicy.from_config(scoring)
    )


def audit_html_accessibility(
    html: Union[str, bytes],
    file_path: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
) -> ScanResult:
    """
    Audit one HTML document for accessibility issues.

    Args:
        html: HTML markup
        file_path: Source file to attribute issues to
        options: Scan and scoring options

    Returns:
        Aggregated scan result

    Raises:
        ParseError: If the content cannot be parsed at all
        ConfigurationError: If an option has the wrong type
    """
    auditor = _build_auditor(options)
    return auditor.audit(html, file_path)


def audit_sources(
    sources: Sequence[SourceDocument], options: Optional[Dict[str, Any]] = None
) -> ScanResult:
    """Audit several documents and aggregate all their issues into one result."""
    auditor = _build_auditor(options)
    return auditor.audit_sources(sources)


def run_scan(
    scan_type: str,
    target_url: Optional[str] = None,
    html_content: Optional[Union[str, bytes]] = None,
    repository_files: Optional[Sequence[RepositoryFile]] = None,
    github_repo: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
    sink: Optional[Sink] = None,
    precomputed: Optional[Tuple[int, str]] = None,
) -> ScanResult:
    """
    Run a complete scan: load, parse, evaluate every check and aggregate.

    Loading and evaluation share one overall timeout taken from the 'timeout'
    scan option.

    Args:
        scan_type: 'url', 'file' or 'repository'
        target_url: Page to fetch for 'url' scans
        html_content: Literal HTML for 'file' scans
        repository_files: Paths, or (path, owner/name) pairs, for 'repository' scans
        github_repo: Default owner/name for repository paths
        options: Scan and scoring options
        sink: Callable receiving the serialized result record
        precomputed: (score, grade) to report instead of the derived values

    Returns:
        Aggregated scan result

    Raises:
        InputError: If the request is missing required input
        FetchError: If remote content cannot be retrieved
        ParseError: If a document cannot be parsed at all
        ScanTimeoutError: If the scan exceeds its timeout
    """
    auditor = _build_auditor(options)
    timeout = auditor.options.get("timeout")

    def scan() -> ScanResult:
        sources = load_sources(
            scan_type,
            target_url=target_url,
            html_content=html_content,
            repository_files=repository_files,
            github_repo=github_repo,
            options=auditor.options,
        )
        logger.info("Loaded %d document(s) for %s scan", len(sources), scan_type)
        return auditor.audit_sources(sources)

    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(scan)
    try:
        result = future.result(timeout=timeout)
    except FutureTimeoutError as e:
        future.cancel()
        raise ScanTimeoutError(f"Scan did not finish within {timeout} seconds") from e
    finally:
        executor.shutdown(wait=False)

    if precomputed is not None:
        result = aggregate(result.issues, auditor.policy, precomputed)

    if sink is not None:
        ReportEmitter(sink).emit(result)

    return result
