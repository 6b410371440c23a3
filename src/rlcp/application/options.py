"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass, field
from pathlib import Path

from rlcp.types import QUALITY_VALUES, QualityTier, TargetFormat


@dataclass(frozen=True)
class ConversionOptions:
    """Immutable per-run conversion settings.

    Directory fields are POSIX paths relative to the run root.
    """

    input_dir: str
    output_dir: str
    target_format: TargetFormat = "webp"
    quality_tier: QualityTier = "small"
    blacklists: tuple[str, ...] = field(default_factory=tuple)

    @property
    def quality(self) -> int:
        """Encoder quality for the configured tier."""
        return QUALITY_VALUES[self.quality_tier]

    @property
    def target_extension(self) -> str:
        """File extension, including the dot, for converted assets."""
        if self.target_format == "jpg":
            return ".jpg"
        return f".{self.target_format}"


def normalize_relative(path: str | Path, root: Path) -> str:
    """Express ``path`` as a normalised POSIX path relative to ``root``."""
    raw = os.fspath(path)
    if os.path.isabs(raw):
        raw = os.path.relpath(raw, root)
    normalized = posixpath.normpath(Path(raw).as_posix())
    return normalized


def build_conversion_options(
    *,
    root: Path,
    input_dir: str | Path,
    output_dir: str | Path,
    target_format: TargetFormat = "webp",
    quality_tier: QualityTier = "small",
    blacklists: tuple[str, ...] | list[str] = (),
) -> ConversionOptions:
    """Build typed option object from config/API params."""
    return ConversionOptions(
        input_dir=normalize_relative(input_dir, root),
        output_dir=normalize_relative(output_dir, root),
        target_format=target_format,
        quality_tier=quality_tier,
        blacklists=tuple(blacklists),
    )
