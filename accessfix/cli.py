# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the accessfix package.

This module provides the ``accessfix scan`` command, which scans a URL, a local
HTML file or files in a GitHub repository and prints or saves the report.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from accessfix import __version__
from accessfix.api import run_scan
from accessfix.audit.report_generator import REPORT_FORMATS, generate_report
from accessfix.dom import PARSER_BACKENDS
from accessfix.utils.config import (
    config_manager,
    load_config_file,
    save_config,
)
from accessfix.utils.logging_helper import AccessFixError, InputError, setup_logger

# Set up module-level logger
logger = setup_logger(__name__)

CONFIG_SECTIONS = ("scan", "scoring", "report")


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging based on debug and quiet flags."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.getLogger().setLevel(level)
    # Module loggers are created at import time with their own level
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("accessfix"):
            logging.getLogger(name).setLevel(level)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="accessfix",
        description="Scan HTML for accessibility issues and suggest fixes",
    )
    parser.add_argument(
        "--version", "-v", action="store_true", help="Show version information"
    )

    subparsers = parser.add_subparsers(dest="command")
    scan_parser = subparsers.add_parser("scan", help="Scan HTML for accessibility issues")

    source = scan_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="URL of the page to scan")
    source.add_argument("--file", help="Local HTML file to scan")
    source.add_argument("--repo", help="GitHub repository to scan, as owner/name")

    scan_parser.add_argument(
        "--path",
        action="append",
        dest="paths",
        metavar="PATH",
        help="File in the repository to scan (repeatable, requires --repo)",
    )
    scan_parser.add_argument("--output", "-o", help="Write the report to this file")
    scan_parser.add_argument(
        "--format", "-f", choices=REPORT_FORMATS, help="Report format"
    )
    scan_parser.add_argument(
        "--parser", choices=PARSER_BACKENDS, help="Parser backend to use"
    )
    scan_parser.add_argument(
        "--workers", type=int, help="Repository files scanned concurrently"
    )
    scan_parser.add_argument(
        "--timeout", type=float, help="Overall scan timeout in seconds"
    )
    scan_parser.add_argument("--github-token", help="GitHub token for repository scans")
    scan_parser.add_argument("--config", "-c", help="Path to configuration file")
    scan_parser.add_argument(
        "--save-config",
        metavar="CONFIG_PATH",
        help="Save current configuration to the specified file path",
    )
    scan_parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    scan_parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only output reports, suppress other output",
    )

    return parser


def apply_config_file(config_path: str) -> None:
    """Load a configuration file into the persistent user configuration."""
    logger.info("Loading configuration from %s", config_path)
    config_data = load_config_file(config_path)

    for section in CONFIG_SECTIONS:
        if section in config_data:
            config_manager.set_user_config(config_data[section], section)
            logger.debug("Applied configuration for section: %s", section)


def build_options(args: Dict[str, Any]) -> Dict[str, Any]:
    """Translate command-line flags into scan options."""
    options: Dict[str, Any] = {}
    if args.get("parser"):
        options["parser_backend"] = args["parser"]
    if args.get("workers") is not None:
        options["max_workers"] = args["workers"]
    if args.get("timeout") is not None:
        options["timeout"] = args["timeout"]
    if args.get("github_token"):
        options["github_token"] = args["github_token"]
    return options


def save_configuration_from_args(args: Dict[str, Any], options: Dict[str, Any]) -> None:
    """Save the effective configuration when --save-config is given."""
    config_path = args.get("save_config")
    if not config_path:
        return

    file_format = "json" if config_path.lower().endswith(".json") else "yaml"

    scan = config_manager.get_config(options, section="scan")
    # Never persist credentials
    scan.pop("github_token", None)
    report = config_manager.get_config(section="report")
    if args.get("format"):
        report["report_format"] = args["format"]

    config = {
        "scan": scan,
        "scoring": config_manager.get_config(section="scoring"),
        "report": report,
    }
    save_config(config, config_path, file_format)


def read_html_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputError(f"Error reading {path}: {e}") from e


def run_scan_command(args: Dict[str, Any]) -> int:
    """Run the scan command."""
    options = build_options(args)
    report_format = args.get("format") or config_manager.get_config(section="report")[
        "report_format"
    ]

    if args.get("repo"):
        if not args.get("paths"):
            raise InputError("--repo requires at least one --path")
        result = run_scan(
            "repository",
            repository_files=args["paths"],
            github_repo=args["repo"],
            options=options,
        )
    elif args.get("url"):
        result = run_scan("url", target_url=args["url"], options=options)
    else:
        result = run_scan(
            "file", html_content=read_html_file(args["file"]), options=options
        )

    report = generate_report(result, args.get("output"), report_format)
    if not args.get("output"):
        print(report)
    elif not args.get("quiet"):
        print(
            f"Score: {result.score}/100 ({result.grade}), "
            f"{result.total_issues} issues. Report saved to {args['output']}"
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = vars(parser.parse_args(argv))

    if args.get("version"):
        print(f"AccessFix v{__version__}")
        return 0

    if args.get("command") is None:
        parser.print_help()
        return 0

    configure_logging(debug=args.get("debug", False), quiet=args.get("quiet", False))

    try:
        if args.get("config"):
            apply_config_file(args["config"])

        save_configuration_from_args(args, build_options(args))

        return run_scan_command(args)
    except AccessFixError as e:
        logger.error("Scan failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
