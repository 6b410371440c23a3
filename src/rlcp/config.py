"""Configuration file loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from rlcp.errors import ConfigError
from rlcp.schemas import RlcpConfig
from rlcp.types import CONFIG_FILE_NAME


def default_config_path(root: Path) -> Path:
    """Return the conventional config location for a run root."""
    return root / CONFIG_FILE_NAME


def load_config(path: Path) -> RlcpConfig:
    """Read and validate a configuration file.

    Parameters
    ----------
    path : Path
        Location of ``rlcp.config.json``.

    Returns
    -------
    RlcpConfig
        Validated configuration.

    Raises
    ------
    ConfigError
        If the file is missing, is not valid JSON, or fails validation.
    """
    if not path.is_file():
        raise ConfigError(f"Configuration file {path.name} not found in {path.parent}.")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Error reading configuration file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object.")
    try:
        return RlcpConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
