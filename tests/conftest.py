"""Shared test fixtures."""

import os
from pathlib import Path

import pytest

from accessfix.utils.config import config_manager


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def accessible_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "accessible_page.html").read_text(encoding="utf-8")


@pytest.fixture
def inaccessible_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "inaccessible_page.html").read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from persistent user config and ACCESSFIX_ env vars."""
    for name in list(os.environ):
        if name.startswith("ACCESSFIX_"):
            monkeypatch.delenv(name)
    config_manager.reset_user_config()
    yield
    config_manager.reset_user_config()


@pytest.fixture(params=["tree", "text"])
def backend(request) -> str:
    return request.param
