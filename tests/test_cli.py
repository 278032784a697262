"""Tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml

from accessfix import __version__
from accessfix.cli import main
from accessfix.utils.report_models import ScanResult


def test_version(capsys: pytest.CaptureFixture):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_no_command_prints_help(capsys: pytest.CaptureFixture):
    assert main([]) == 0
    assert "scan" in capsys.readouterr().out


def test_scan_file_prints_json(fixtures_dir: Path, capsys: pytest.CaptureFixture):
    code = main(["scan", "--file", str(fixtures_dir / "inaccessible_page.html"), "--quiet"])

    assert code == 0
    record = json.loads(capsys.readouterr().out)
    assert record["totalIssues"] == 12
    assert record["grade"] == "F"


def test_scan_file_text_output(fixtures_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    output = tmp_path / "report.txt"
    code = main(
        [
            "scan",
            "--file",
            str(fixtures_dir / "accessible_page.html"),
            "--format",
            "text",
            "--parser",
            "text",
            "--output",
            str(output),
        ]
    )

    assert code == 0
    assert "Score: 100/100 (A)" in output.read_text(encoding="utf-8")
    assert "Report saved to" in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture):
    code = main(["scan", "--file", str(tmp_path / "missing.html"), "--quiet"])
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_repo_requires_path(capsys: pytest.CaptureFixture):
    assert main(["scan", "--repo", "owner/repo", "--quiet"]) == 1


@patch("accessfix.cli.run_scan")
def test_repo_scan_passes_paths(mock_run_scan: MagicMock, capsys: pytest.CaptureFixture):
    mock_run_scan.return_value = ScanResult()

    code = main(
        [
            "scan",
            "--repo",
            "owner/repo",
            "--path",
            "index.html",
            "--path",
            "docs/about.html",
            "--workers",
            "2",
            "--github-token",
            "secret",
            "--quiet",
        ]
    )

    assert code == 0
    mock_run_scan.assert_called_once_with(
        "repository",
        repository_files=["index.html", "docs/about.html"],
        github_repo="owner/repo",
        options={"max_workers": 2, "github_token": "secret"},
    )


@patch("accessfix.cli.run_scan")
def test_url_scan(mock_run_scan: MagicMock, capsys: pytest.CaptureFixture):
    mock_run_scan.return_value = ScanResult()

    assert main(["scan", "--url", "https://example.com", "--timeout", "5", "--quiet"]) == 0
    mock_run_scan.assert_called_once_with(
        "url", target_url="https://example.com", options={"timeout": 5.0}
    )


def test_config_file_is_applied(fixtures_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    config_path = tmp_path / "accessfix.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "scan": {"disabled_checks": ["document-language"]},
                "report": {"report_format": "text"},
            }
        )
    )

    code = main(
        [
            "scan",
            "--file",
            str(fixtures_dir / "inaccessible_page.html"),
            "--config",
            str(config_path),
            "--quiet",
        ]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("Accessibility Scan Report")
    assert "Total issues: 11" in out


def test_save_config_omits_token(fixtures_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture):
    saved = tmp_path / "saved.json"

    code = main(
        [
            "scan",
            "--file",
            str(fixtures_dir / "accessible_page.html"),
            "--workers",
            "3",
            "--github-token",
            "secret",
            "--save-config",
            str(saved),
            "--quiet",
        ]
    )

    assert code == 0
    config = json.loads(saved.read_text())
    assert config["scan"]["max_workers"] == 3
    assert "github_token" not in config["scan"]
    assert config["scoring"]["critical_weight"] == 10
