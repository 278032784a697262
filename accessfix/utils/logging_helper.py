# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Error handling utilities for the accessfix package.

This module provides the exception taxonomy used by the scanner together with
standardized logger setup, so that every module reports failures the same way.
"""

import logging
import sys
from typing import Optional


class AccessFixError(Exception):
    """Base exception class for all accessfix errors."""


class FetchError(AccessFixError):
    """Raised when a URL or repository file cannot be fetched."""


class InputError(AccessFixError):
    """Raised when scan input is missing or invalid."""


class ParseError(AccessFixError):
    """Raised when content cannot be interpreted as markup at all."""


class RuleEvaluationError(AccessFixError):
    """Raised when a single accessibility check fails on a parsed document."""

    def __init__(self, check_name: str, original: Exception):
        self.check_name = check_name
        self.original = original
        super().__init__(
            f"Check {check_name} failed: {type(original).__name__} - {original}"
        )


class ConfigurationError(AccessFixError):
    """Raised when there's an error in configuration."""


class ScanTimeoutError(AccessFixError):
    """Raised when a scan does not finish within its overall timeout."""


# Configure module-level logger
logger = logging.getLogger(__name__)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with standardized formatting.

    Args:
        name: The logger name, typically __name__ of the calling module
        level: The logging level (default: INFO if not in debug mode)

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)

    if level is None:
        # Check if root logger is in debug mode (set by --debug flag)
        if logging.getLogger().level <= logging.DEBUG:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.debug("Setting logger %s level to %s", name, logging.getLevelName(level))

    logger_obj.setLevel(level)
    logger_obj.propagate = True

    # Create handler if no handlers exist
    if not logger_obj.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger_obj.addHandler(handler)

    return logger_obj


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str = "An error occurred",
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """
    Log an exception with consistent formatting.

    Args:
        logger: The logger instance to use
        exception: The exception to log
        message: Optional custom message
        level: The logging level to use
        include_traceback: Whether to include the full traceback
    """
    error_type = type(exception).__name__
    error_message = str(exception)

    log_msg = f"{message}: {error_type} - {error_message}"

    if include_traceback:
        logger.log(level, log_msg, exc_info=exception)
    else:
        logger.log(level, log_msg)
