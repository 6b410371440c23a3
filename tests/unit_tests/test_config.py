"""Unit tests for configuration loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rlcp.config import default_config_path, load_config
from rlcp.errors import ConfigError


def _write_config(root: Path, payload: object) -> Path:
    path = default_config_path(root)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_minimal_config_uses_defaults(tmp_path: Path) -> None:
    """Fill optional fields with their defaults."""
    config = load_config(_write_config(tmp_path, {"input": "public", "output": "backup"}))

    assert config.input == "public"
    assert config.output == "backup"
    assert config.blacklists == []
    assert config.file_size is None
    assert config.preferred_type is None
    assert config.working_directory is None


def test_full_config(tmp_path: Path) -> None:
    """Accept every documented field and ignore unknown ones."""
    config = load_config(
        _write_config(
            tmp_path,
            {
                "$schema": "./schema.json",
                "input": "public",
                "output": "backup",
                "blacklists": ["public/favicons/**"],
                "file_size": "smallest",
                "preferred_type": "jpg",
                "working_directory": "src",
            },
        )
    )

    assert config.blacklists == ["public/favicons/**"]
    assert config.file_size == "smallest"
    assert config.preferred_type == "jpg"
    assert config.working_directory == "src"


def test_missing_config_file(tmp_path: Path) -> None:
    """Raise a setup error when the config file is absent."""
    with pytest.raises(ConfigError, match="rlcp.config.json not found"):
        load_config(default_config_path(tmp_path))


@pytest.mark.parametrize(
    "payload",
    [
        {"output": "backup"},
        {"input": "public"},
        {"input": "  ", "output": "backup"},
        {"input": "public", "output": "backup", "file_size": "tiny"},
        {"input": "public", "output": "backup", "preferred_type": "gif"},
        {"input": "public", "output": "./public/"},
        ["public", "backup"],
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, payload: object) -> None:
    """Raise a setup error for missing or invalid fields."""
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, payload))


def test_malformed_json_is_rejected(tmp_path: Path) -> None:
    """Raise a setup error for unparsable files."""
    path = default_config_path(tmp_path)
    path.write_text("{input: public", encoding="utf-8")

    with pytest.raises(ConfigError, match="Error reading configuration file"):
        load_config(path)
