"""Tests for configuration management."""

import json
from pathlib import Path

import pytest
import yaml

from accessfix.utils.config import (
    ConfigManager,
    config_manager,
    load_config_file,
    save_config,
    validate_options,
)
from accessfix.utils.logging_helper import ConfigurationError


def test_defaults_per_section():
    scan = config_manager.get_config(section="scan")
    assert scan["parser_backend"] == "tree"
    assert scan["timeout"] == 30.0
    assert config_manager.get_config(section="scoring")["critical_weight"] == 10


def test_precedence_user_env_runtime(monkeypatch: pytest.MonkeyPatch):
    manager = ConfigManager({"scan": {"max_workers": 1, "timeout": 30.0}})
    manager.set_user_config({"max_workers": 2, "timeout": 10.0}, "scan")
    monkeypatch.setenv("ACCESSFIX_SCAN_MAX_WORKERS", "4")

    config = manager.get_config({"timeout": 5.0}, section="scan")

    assert config["max_workers"] == 4
    assert config["timeout"] == 5.0


def test_env_values_are_converted(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ACCESSFIX_SCAN_TIMEOUT", "12.5")
    monkeypatch.setenv("ACCESSFIX_SCAN_DISABLED_CHECKS", "image-alt, link-text")

    config = config_manager.get_config(section="scan")

    assert config["timeout"] == 12.5
    assert config["disabled_checks"] == ["image-alt", "link-text"]


def test_defaults_are_not_mutated():
    config = config_manager.get_config(section="scan")
    config["disabled_checks"].append("image-alt")
    assert config_manager.get_config(section="scan")["disabled_checks"] == []


def test_validate_options():
    validate_options({"max_workers": 2}, {"max_workers": int})
    validate_options({"max_workers": None}, {"max_workers": int})
    with pytest.raises(ConfigurationError, match="max_workers"):
        validate_options({"max_workers": "2"}, {"max_workers": int})


def test_yaml_round_trip(tmp_path: Path):
    path = tmp_path / "accessfix.yaml"
    save_config({"scan": {"max_workers": 3}}, str(path))
    assert yaml.safe_load(path.read_text()) == {"scan": {"max_workers": 3}}
    assert load_config_file(str(path)) == {"scan": {"max_workers": 3}}


def test_load_json_config(tmp_path: Path):
    path = tmp_path / "accessfix.json"
    path.write_text(json.dumps({"scoring": {"info_weight": 1}}))
    assert load_config_file(str(path)) == {"scoring": {"info_weight": 1}}


def test_load_missing_file():
    with pytest.raises(ConfigurationError, match="not found"):
        load_config_file("/nonexistent/accessfix.yaml")


def test_load_unsupported_extension(tmp_path: Path):
    path = tmp_path / "accessfix.toml"
    path.write_text("x = 1")
    with pytest.raises(ConfigurationError, match="Unsupported"):
        load_config_file(str(path))


def test_load_invalid_yaml(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("scan: [unclosed")
    with pytest.raises(ConfigurationError):
        load_config_file(str(path))


def test_load_requires_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config_file(str(path))


def test_save_unsupported_format(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        save_config({}, str(tmp_path / "x.ini"), "ini")
