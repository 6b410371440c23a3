"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from rlcp.application.lock_state import LockState
from rlcp.types import TargetFormat


class ImageCodec(Protocol):
    """Re-encode an image file into another format."""

    def encode(
        self,
        source: Path,
        destination: Path,
        target_format: TargetFormat,
        quality: int,
    ) -> None:
        """Write ``source`` re-encoded as ``target_format`` to ``destination``."""


class AssetDiscoverer(Protocol):
    """Enumerate candidate image assets under an input root."""

    def discover(
        self,
        root: Path,
        input_dir: str,
        blacklists: Sequence[str],
    ) -> list[str]:
        """Return candidate paths relative to ``root``, in processing order."""


class LockRepository(Protocol):
    """Load and persist conversion lock state."""

    def load(self) -> LockState:
        """Return persisted state, or an empty state when unavailable."""

    def save(self, state: LockState) -> bool:
        """Persist ``state``; return ``False`` when the write failed."""
