"""Tests for the document loader. Network access is mocked."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from accessfix.loader import load_sources
from accessfix.utils.logging_helper import FetchError, InputError


def _response(text: str = "<p></p>", status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    response.ok = status_code < 400
    return response


@patch("accessfix.loader.requests.get")
def test_url_scan_fetches_once(mock_get: MagicMock):
    mock_get.return_value = _response("<html></html>")

    sources = load_sources("url", target_url="https://example.com", options={"fetch_timeout": 5})

    assert [source.html for source in sources] == ["<html></html>"]
    assert sources[0].file_path is None
    mock_get.assert_called_once_with("https://example.com", timeout=5)


@patch("accessfix.loader.requests.get")
def test_url_scan_non_2xx_raises(mock_get: MagicMock):
    mock_get.return_value = _response(status_code=404)
    with pytest.raises(FetchError, match="HTTP 404"):
        load_sources("url", target_url="https://example.com/missing")
    assert mock_get.call_count == 1


@pytest.mark.parametrize("status_code", [101, 301, 304, 500])
@patch("accessfix.loader.requests.get")
def test_url_scan_rejects_statuses_outside_2xx(mock_get: MagicMock, status_code: int):
    mock_get.return_value = _response("<html></html>", status_code=status_code)
    with pytest.raises(FetchError, match=f"HTTP {status_code}"):
        load_sources("url", target_url="https://example.com")


@patch("accessfix.loader.requests.get")
def test_url_scan_transport_error_raises(mock_get: MagicMock):
    mock_get.side_effect = requests.exceptions.ConnectionError("refused")
    with pytest.raises(FetchError):
        load_sources("url", target_url="https://example.com")
    assert mock_get.call_count == 1


def test_url_scan_requires_url():
    with pytest.raises(InputError):
        load_sources("url")


def test_file_scan_returns_content():
    sources = load_sources("file", html_content="<p>Hi</p>")
    assert sources[0].html == "<p>Hi</p>"


def test_file_scan_decodes_bytes():
    sources = load_sources("file", html_content="<p>é</p>".encode("utf-8"))
    assert sources[0].html == "<p>é</p>"


@pytest.mark.parametrize("content", [None, "", "   \n", 42, b"\xff\xfe"])
def test_file_scan_rejects_invalid_content(content):
    with pytest.raises(InputError):
        load_sources("file", html_content=content)


def test_unknown_scan_type():
    with pytest.raises(InputError, match="Unknown scan type"):
        load_sources("ftp")


@patch("accessfix.loader.requests.Session")
def test_repository_scan_fetches_each_file(mock_session_cls: MagicMock):
    session = mock_session_cls.return_value.__enter__.return_value
    session.headers = {}
    session.get.side_effect = [_response("<h1>A</h1>"), _response("<h1>B</h1>")]

    sources = load_sources(
        "repository",
        repository_files=["docs/a.html", ("b.html", "other/site")],
        github_repo="owner/repo",
        options={"github_token": "secret", "github_ref": "main", "fetch_timeout": 3},
    )

    assert [(s.file_path, s.html) for s in sources] == [
        ("docs/a.html", "<h1>A</h1>"),
        ("b.html", "<h1>B</h1>"),
    ]
    assert session.headers["Accept"] == "application/vnd.github.raw"
    assert session.headers["Authorization"] == "token secret"
    urls = [call.args[0] for call in session.get.call_args_list]
    assert urls == [
        "https://api.github.com/repos/owner/repo/contents/docs/a.html",
        "https://api.github.com/repos/other/site/contents/b.html",
    ]
    assert session.get.call_args_list[0].kwargs == {"params": {"ref": "main"}, "timeout": 3}


@patch("accessfix.loader.requests.Session")
def test_repository_scan_without_token(mock_session_cls: MagicMock):
    session = mock_session_cls.return_value.__enter__.return_value
    session.headers = {}
    session.get.return_value = _response()

    load_sources("repository", repository_files=["index.html"], github_repo="owner/repo")

    assert "Authorization" not in session.headers
    assert session.get.call_args.kwargs["params"] is None


@patch("accessfix.loader.requests.Session")
def test_repository_scan_non_2xx_raises(mock_session_cls: MagicMock):
    session = mock_session_cls.return_value.__enter__.return_value
    session.headers = {}
    session.get.return_value = _response(status_code=403)

    with pytest.raises(FetchError, match="HTTP 403"):
        load_sources("repository", repository_files=["index.html"], github_repo="owner/repo")
    assert session.get.call_count == 1


def test_repository_scan_requires_files():
    with pytest.raises(InputError):
        load_sources("repository", repository_files=[], github_repo="owner/repo")


def test_repository_scan_requires_repo():
    with pytest.raises(InputError, match="owner/name"):
        load_sources("repository", repository_files=["index.html"])


@patch("accessfix.loader.requests.Session")
def test_repository_scan_rejects_not_modified(mock_session_cls: MagicMock):
    session = mock_session_cls.return_value.__enter__.return_value
    session.headers = {}
    session.get.side_effect = [_response("<h1>A</h1>"), _response(status_code=304)]

    with pytest.raises(FetchError, match="HTTP 304"):
        load_sources(
            "repository",
            repository_files=["a.html", "b.html"],
            github_repo="owner/repo",
        )
