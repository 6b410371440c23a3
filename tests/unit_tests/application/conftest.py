"""Fake ports shared by application-layer tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from rlcp.application.lock_state import LockState


class FakeCodec:
    """Write a recognisable payload instead of encoding."""

    def __init__(self, fail_on: Sequence[str] = ()) -> None:
        self.fail_on = set(fail_on)
        self.calls: list[tuple[Path, Path, str, int]] = []

    def encode(self, source: Path, destination: Path, target_format: str, quality: int) -> None:
        self.calls.append((source, destination, target_format, quality))
        if source.name in self.fail_on:
            destination.write_bytes(b"partial")
            raise RuntimeError(f"cannot decode {source.name}")
        destination.write_bytes(b"encoded:" + source.read_bytes())


class FakeDiscoverer:
    """Return a fixed candidate list and remember the request."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        self.requests: list[tuple[Path, str, tuple[str, ...]]] = []

    def discover(self, root: Path, input_dir: str, blacklists: Sequence[str]) -> list[str]:
        self.requests.append((root, input_dir, tuple(blacklists)))
        return list(self.candidates)


class MemoryLockStore:
    """Keep lock state in memory and count loads and saves."""

    def __init__(self, conversions: dict[str, str] | None = None, writable: bool = True) -> None:
        self.conversions = dict(conversions or {})
        self.writable = writable
        self.loads = 0
        self.saves = 0

    def load(self) -> LockState:
        self.loads += 1
        return LockState(self.conversions)

    def save(self, state: LockState) -> bool:
        self.saves += 1
        if not self.writable:
            return False
        self.conversions = state.to_dict()
        return True


@pytest.fixture
def codec() -> FakeCodec:
    return FakeCodec()


def write_asset(root: Path, relative: str, payload: bytes = b"original") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return path


@pytest.fixture
def make_codec() -> type[FakeCodec]:
    return FakeCodec


@pytest.fixture
def make_discoverer() -> type[FakeDiscoverer]:
    return FakeDiscoverer


@pytest.fixture
def make_lock_store() -> type[MemoryLockStore]:
    return MemoryLockStore


@pytest.fixture(name="write_asset")
def write_asset_fixture():
    return write_asset
