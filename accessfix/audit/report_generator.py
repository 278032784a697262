# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Generate accessibility scan reports.

The emitter only serializes: it hands the stable record shape of a
``ScanResult`` to whichever sink is configured, or renders it as JSON or plain
text.
"""

import os
from typing import Any, Callable, Dict, Optional

from accessfix.utils.logging_helper import setup_logger
from accessfix.utils.report_models import ScanResult, Severity

logger = setup_logger(__name__)

REPORT_FORMATS = ("json", "text")

Sink = Callable[[Dict[str, Any]], None]


class ReportEmitter:
    """Hands scan results to an external sink."""

    def __init__(self, sink: Sink):
        """
        Args:
            sink: Callable receiving the serialized scan record
        """
        self.sink = sink

    def emit(self, result: ScanResult) -> Dict[str, Any]:
        record = result.to_record()
        self.sink(record)
        logger.debug("Emitted scan record with %d issues", record["totalIssues"])
        return record


def file_sink(output_path: str, report_format: str = "json") -> Sink:
    """Sink writing each emitted record to output_path in the given format."""

    def write(record: Dict[str, Any]) -> None:
        generate_report(ScanResult.model_validate(record), output_path, report_format)

    return write


def generate_report(
    result: ScanResult,
    output_path: Optional[str] = None,
    report_format: str = "json",
) -> str:
    """
    Render a scan result in the specified format.

    Args:
        result: Scan result to render
        output_path: Path where the report should be saved, if any
        report_format: Format of the report (json or text)

    Returns:
        The rendered report
    """
    if report_format not in REPORT_FORMATS:
        logger.warning("Unknown report format: %s, using JSON", report_format)
        report_format = "json"

    if report_format == "text":
        content = generate_text_report(result)
    else:
        content = result.to_json()

    if output_path:
        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
            if not content.endswith("\n"):
                f.write("\n")
        logger.info("Generated %s report: %s", report_format.upper(), output_path)

    return content


def generate_text_report(result: ScanResult) -> str:
    """Render a human-readable summary followed by issues grouped by severity."""
    lines = [
        "Accessibility Scan Report",
        "=" * 25,
        f"Score: {result.score}/100 ({result.grade})",
        f"Total issues: {result.total_issues}",
        f"Critical: {result.critical_count}  Warnings: {result.warning_count}  "
        f"Info: {result.info_count}",
    ]

    for severity in Severity:
        group = [issue for issue in result.issues if issue.severity == severity]
        if not group:
            continue
        lines.append("")
        lines.append(f"{severity.value.upper()} ({len(group)})")
        lines.append("-" * (len(severity.value) + len(str(len(group))) + 3))
        for index, issue in enumerate(group, start=1):
            location = ", ".join(
                part
                for part in (
                    issue.file_path,
                    f"line {issue.line_number}" if issue.line_number else None,
                    issue.selector,
                )
                if part
            )
            lines.append(f"{index}. [{issue.category}] {issue.title}")
            if location:
                lines.append(f"   Location: {location}")
            lines.append(f"   {issue.description}")
            lines.append(f"   Fix: {issue.recommended_fix}")
            if issue.wcag_criteria:
                lines.append(f"   WCAG: {issue.wcag_criteria}")

    return "\n".join(lines)
