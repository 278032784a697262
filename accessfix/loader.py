# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Document loader.

Turns a scan request into the HTML documents to audit: a fetched URL, literal
HTML content, or files read from a GitHub repository.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import requests

from accessfix.utils.config import config_manager
from accessfix.utils.logging_helper import FetchError, InputError, setup_logger
from accessfix.utils.report_models import SourceDocument

# Set up module-level logger
logger = setup_logger(__name__)

SCAN_TYPES = ("url", "file", "repository")

GITHUB_API_URL = "https://api.github.com"
GITHUB_RAW_MEDIA_TYPE = "application/vnd.github.raw"

RepositoryFile = Union[str, Tuple[str, str]]


def load_sources(
    scan_type: str,
    target_url: Optional[str] = None,
    html_content: Optional[Union[str, bytes]] = None,
    repository_files: Optional[Sequence[RepositoryFile]] = None,
    github_repo: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
) -> List[SourceDocument]:
    """
    Load the documents for a scan.

    Args:
        scan_type: 'url', 'file' or 'repository'
        target_url: Page to fetch for 'url' scans
        html_content: Literal HTML for 'file' scans
        repository_files: Paths, or (path, owner/name) pairs, for 'repository' scans
        github_repo: Default owner/name for repository paths
        options: Overrides for the 'scan' configuration section

    Returns:
        Documents to audit, in request order

    Raises:
        InputError: If the request is missing required input
        FetchError: If remote content cannot be retrieved
    """
    config = config_manager.get_config(options, section="scan")

    if scan_type == "url":
        return [fetch_url(target_url, timeout=config.get("fetch_timeout"))]
    if scan_type == "file":
        return [SourceDocument(html=_decode_content(html_content))]
    if scan_type == "repository":
        return fetch_repository_files(
            repository_files,
            github_repo=github_repo,
            token=config.get("github_token"),
            ref=config.get("github_ref"),
            timeout=config.get("fetch_timeout"),
        )

    raise InputError(
        f"Unknown scan type '{scan_type}', expected one of {', '.join(SCAN_TYPES)}"
    )


def _decode_content(content: Any) -> str:
    if content is None:
        raise InputError("No HTML content provided")
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputError(f"HTML content is not valid UTF-8: {e}") from e
    if not isinstance(content, str):
        raise InputError(
            f"HTML content must be text, got {type(content).__name__}"
        )
    if not content.strip():
        raise InputError("HTML content is empty")
    return content


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def fetch_url(url: Optional[str], timeout: Optional[float] = None) -> SourceDocument:
    """Fetch one page with a single GET request."""
    if not url or not isinstance(url, str):
        raise InputError("No URL provided for url scan")

    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Error fetching {url}: {e}") from e

    if not _is_success(response):
        raise FetchError(f"Error fetching {url}: HTTP {response.status_code}")

    return SourceDocument(html=response.text)


def fetch_repository_files(
    repository_files: Optional[Sequence[RepositoryFile]],
    github_repo: Optional[str] = None,
    token: Optional[str] = None,
    ref: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[SourceDocument]:
    """
    Fetch files from GitHub, one contents API request per file.

    Each document keeps its repository path as ``file_path``.
    """
    if not repository_files:
        raise InputError("No repository files provided for repository scan")

    headers = {"Accept": GITHUB_RAW_MEDIA_TYPE}
    if token:
        headers["Authorization"] = f"token {token}"
    params = {"ref": ref} if ref else None

    documents = []
    with requests.Session() as session:
        session.headers.update(headers)
        for entry in repository_files:
            path, repo = _split_entry(entry, github_repo)
            url = f"{GITHUB_API_URL}/repos/{repo}/contents/{path.lstrip('/')}"
            logger.debug("Fetching %s from %s", path, repo)
            try:
                response = session.get(url, params=params, timeout=timeout)
            except requests.exceptions.RequestException as e:
                raise FetchError(f"Error fetching {path} from {repo}: {e}") from e

            if not _is_success(response):
                raise FetchError(
                    f"Error fetching {path} from {repo}: HTTP {response.status_code}"
                )
            documents.append(SourceDocument(html=response.text, file_path=path))

    logger.info("Fetched %d files from GitHub", len(documents))
    return documents


def _split_entry(entry: RepositoryFile, github_repo: Optional[str]) -> Tuple[str, str]:
    if isinstance(entry, (tuple, list)):
        if len(entry) != 2:
            raise InputError(f"Repository file entry must be (path, repo): {entry!r}")
        path, repo = entry
    else:
        path, repo = entry, github_repo

    if not path or not isinstance(path, str):
        raise InputError(f"Invalid repository file path: {path!r}")
    if not repo or "/" not in repo:
        raise InputError(f"Repository for {path} must be given as owner/name")
    return path, repo
