"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Optional

from rlcp.adapters.codecs import PillowImageCodec
from rlcp.adapters.discovery import GlobAssetDiscoverer
from rlcp.application.options import ConversionOptions, build_conversion_options
from rlcp.application.ports import AssetDiscoverer, ImageCodec, LockRepository
from rlcp.application.results import RunSummary
from rlcp.application.use_cases import run_conversion
from rlcp.config import default_config_path, load_config
from rlcp.errors import ConfigError
from rlcp.infrastructure.gitignore import ensure_gitignore
from rlcp.infrastructure.lock_store import JsonLockStore
from rlcp.schemas import RlcpConfig
from rlcp.types import QualityTier, TargetFormat

logger = logging.getLogger(__name__)


def options_from_config(
    config: RlcpConfig,
    root: Path,
    target_format: Optional[TargetFormat] = None,
    quality_tier: Optional[QualityTier] = None,
) -> ConversionOptions:
    """Combine a loaded config with explicit overrides.

    Overrides win over config values; ``webp`` and ``small`` are the
    fallbacks.  A backup root nested in the input root is blacklisted so its
    files are never rediscovered.
    """
    options = build_conversion_options(
        root=root,
        input_dir=config.input,
        output_dir=config.output,
        target_format=target_format or config.preferred_type or "webp",
        quality_tier=quality_tier or config.file_size or "small",
        blacklists=config.blacklists,
    )
    if _is_nested(options.output_dir, options.input_dir):
        options = build_conversion_options(
            root=root,
            input_dir=options.input_dir,
            output_dir=options.output_dir,
            target_format=options.target_format,
            quality_tier=options.quality_tier,
            blacklists=[*options.blacklists, f"{options.output_dir}/**"],
        )
    return options


def convert_assets(
    root: Optional[Path] = None,
    *,
    config: Optional[RlcpConfig] = None,
    config_path: Optional[Path] = None,
    target_format: Optional[TargetFormat] = None,
    quality_tier: Optional[QualityTier] = None,
    working_directory: Optional[str | Path] = None,
    codec: Optional[ImageCodec] = None,
    discoverer: Optional[AssetDiscoverer] = None,
    lock_store: Optional[LockRepository] = None,
) -> RunSummary:
    """Convert configured image assets and rewrite references to them.

    Parameters
    ----------
    root : Path | None, default=None
        Run root; defaults to the current working directory.
    config : RlcpConfig | None, default=None
        Preloaded configuration.  Loaded from ``config_path`` (or
        ``root/rlcp.config.json``) when omitted.
    working_directory : str | Path | None, default=None
        Tree to rewrite references in, relative to ``root``.  Falls back to
        the config value; no rewriting happens when neither is set.

    Raises
    ------
    ConfigError
        If the configuration cannot be loaded or the input directory is
        missing.  No file is modified in that case.
    """
    root = (root or Path.cwd()).resolve()
    if config is None:
        config = load_config(config_path or default_config_path(root))

    options = options_from_config(config, root, target_format, quality_tier)
    input_path = root / options.input_dir
    if not input_path.is_dir():
        raise ConfigError(f'Input directory "{config.input}" does not exist.')
    ensure_gitignore(root, options.output_dir)

    working = working_directory if working_directory is not None else config.working_directory
    logger.info(
        "Converting images in %s to %s with %s quality",
        options.input_dir,
        options.target_format,
        options.quality_tier,
    )
    return run_conversion(
        root=root,
        options=options,
        discoverer=discoverer or GlobAssetDiscoverer(),
        codec=codec or PillowImageCodec(),
        lock_store=lock_store or JsonLockStore.for_root(root),
        working_dir=(root / working) if working is not None else None,
    )


def _is_nested(child: str, parent: str) -> bool:
    if parent == ".":
        return not child.startswith("..")
    return posixpath.commonpath([child, parent]) == parent and child != parent
