"""Shared fixtures for rclonecfg tests."""

import json

import pytest

from rclonecfg import utils
from rclonecfg.paths import HostEnvironment


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Keep test runs out of the real per-user log."""
    path = tmp_path / "logs" / "rclonecfg.log"
    monkeypatch.setattr(utils, "LOG_FILE", path)
    return path


@pytest.fixture
def posix_env(tmp_path):
    home = tmp_path / "home"
    return HostEnvironment(platform="Linux", home_dir=str(home))


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
