"""Tests for report rendering and emission."""

import json
from pathlib import Path

from accessfix.api import audit_html_accessibility
from accessfix.audit.report_generator import ReportEmitter, file_sink, generate_report

HTML = '<html><body><img src="x.png"><a href="/">more</a></body></html>'


def test_json_report_matches_record():
    result = audit_html_accessibility(HTML)
    report = generate_report(result)
    assert json.loads(report) == result.to_record()


def test_text_report_groups_by_severity():
    result = audit_html_accessibility(HTML)
    report = generate_report(result, report_format="text")

    assert "Score: 75/100 (C)" in report
    assert "CRITICAL (2)" in report
    assert "WARNING (1)" in report
    assert "INFO" not in report
    assert report.index("CRITICAL (2)") < report.index("WARNING (1)")
    assert "Location: line 1, img:nth-of-type(1)" in report


def test_unknown_format_falls_back_to_json():
    result = audit_html_accessibility(HTML)
    report = generate_report(result, report_format="pdf")
    assert json.loads(report)["totalIssues"] == 3


def test_report_is_written_to_file(tmp_path: Path):
    result = audit_html_accessibility(HTML)
    output = tmp_path / "reports" / "scan.json"

    report = generate_report(result, str(output))

    assert output.read_text(encoding="utf-8") == report + "\n"


def test_emitter_hands_record_to_sink():
    result = audit_html_accessibility(HTML)
    received = []

    record = ReportEmitter(received.append).emit(result)

    assert received == [record]
    assert record["grade"] == "C"


def test_file_sink(tmp_path: Path):
    result = audit_html_accessibility(HTML)
    output = tmp_path / "scan.txt"

    ReportEmitter(file_sink(str(output), "text")).emit(result)

    assert output.read_text(encoding="utf-8").startswith("Accessibility Scan Report")
