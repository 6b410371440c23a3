"""Resumable image-asset conversion with reference rewriting."""

from __future__ import annotations

from pathlib import Path

from rlcp.application.results import RunSummary
from rlcp.types import QualityTier, TargetFormat

__version__ = "0.1.0"


def convert_assets(
    root: Path | None = None,
    *,
    config_path: Path | None = None,
    target_format: TargetFormat | None = None,
    quality_tier: QualityTier | None = None,
    working_directory: str | Path | None = None,
) -> RunSummary:
    """Convert configured image assets and rewrite references to them.

    Parameters
    ----------
    root : Path | None, default=None
        Run root holding ``rlcp.config.json`` and ``rlcp.lock``. Defaults to
        the current working directory.
    config_path : Path | None, default=None
        Explicit configuration file location.
    target_format : {"png", "jpeg", "jpg", "webp"} | None, default=None
        Overrides ``preferred_type`` from the configuration.
    quality_tier : {"small", "smallest"} | None, default=None
        Overrides ``file_size`` from the configuration.
    working_directory : str | Path | None, default=None
        Overrides ``working_directory`` from the configuration.

    Returns
    -------
    RunSummary
        Per-candidate outcomes and reference rewrite report.
    """
    from .api import convert_assets as _impl

    return _impl(
        root,
        config_path=config_path,
        target_format=target_format,
        quality_tier=quality_tier,
        working_directory=working_directory,
    )


__all__ = [
    "RunSummary",
    "convert_assets",
]
