"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rlcp.application.decisions import Decision, Disposition
from rlcp.application.lock_state import LockState
from rlcp.application.options import ConversionOptions
from rlcp.application.ports import AssetDiscoverer, ImageCodec, LockRepository
from rlcp.application.replacements import ReplacementRule
from rlcp.application.results import CandidateOutcome, RewriteReport, RunSummary
from rlcp.types import QualityTier, TargetFormat


def build_conversion_options(
    *,
    root: Path,
    input_dir: str | Path,
    output_dir: str | Path,
    target_format: TargetFormat = "webp",
    quality_tier: QualityTier = "small",
    blacklists: Sequence[str] = (),
) -> ConversionOptions:
    """Build typed conversion options via lazy import."""
    from rlcp.application.options import build_conversion_options as _impl

    return _impl(
        root=root,
        input_dir=input_dir,
        output_dir=output_dir,
        target_format=target_format,
        quality_tier=quality_tier,
        blacklists=tuple(blacklists),
    )


def run_conversion(
    *,
    root: Path,
    options: ConversionOptions,
    discoverer: AssetDiscoverer,
    codec: ImageCodec,
    lock_store: LockRepository,
    working_dir: Path | None = None,
) -> RunSummary:
    """Run a conversion via lazy use-case import."""
    from rlcp.application.use_cases import run_conversion as _impl

    return _impl(
        root=root,
        options=options,
        discoverer=discoverer,
        codec=codec,
        lock_store=lock_store,
        working_dir=working_dir,
    )


__all__ = [
    "CandidateOutcome",
    "ConversionOptions",
    "Decision",
    "Disposition",
    "LockState",
    "ReplacementRule",
    "RewriteReport",
    "RunSummary",
    "build_conversion_options",
    "run_conversion",
]
