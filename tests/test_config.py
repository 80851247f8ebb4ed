# tests/test_config.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Unit tests for YAML configuration loading

import pytest
from pydantic import ValidationError

from seedlink_stations.config import Config, load_config

def test_defaults():
    config = load_config()
    assert config.port == 8086
    assert config.refresh_interval == 300000
    assert config.socket.timeout == 5000
    assert config.default_seedlink_port == 18000
    assert config.max_workers == 1

def test_missing_file_uses_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == Config()

def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "host: 127.0.0.1\n"
        "port: 9000\n"
        "refresh_interval: 60000\n"
        "max_workers: 4\n"
        "socket:\n"
        "  timeout: 2500\n"
    )
    config = load_config(str(path))
    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.max_workers == 4
    assert config.ttl_seconds == 60.0
    assert config.timeout_seconds == 2.5

def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()

@pytest.mark.parametrize("content", ["port: 70000\n", "max_workers: 0\n", "socket:\n  timeout: 0\n"])
def test_invalid_values(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)
    with pytest.raises(ValidationError):
        load_config(str(path))
