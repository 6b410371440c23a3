"""In-memory conversion lock state."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping


class LockState:
    """Mutable mapping of original asset paths to their converted paths.

    Keys are candidate paths as they were discovered; values are converted
    paths relative to the run root.  One instance is owned by a run: it is
    loaded once, mutated by the decision and executor stages, and saved once.
    """

    def __init__(self, conversions: Mapping[str, str] | None = None) -> None:
        self._conversions: dict[str, str] = dict(conversions or {})
        # Targets can repeat when two originals share a stem.
        self._targets: Counter[str] = Counter(self._conversions.values())

    def get(self, original: str) -> str | None:
        """Return the recorded target for ``original``, if any."""
        return self._conversions.get(original)

    def record(self, original: str, target: str) -> None:
        """Record (or overwrite) the conversion of ``original`` into ``target``."""
        previous = self._conversions.get(original)
        if previous is not None:
            self._targets[previous] -= 1
            if self._targets[previous] <= 0:
                del self._targets[previous]
        self._conversions[original] = target
        self._targets[target] += 1

    def is_generated(self, path: str) -> bool:
        """Check whether ``path`` is the output of a recorded conversion."""
        return path in self._targets

    def items(self) -> list[tuple[str, str]]:
        return list(self._conversions.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self._conversions)

    def __contains__(self, original: object) -> bool:
        return original in self._conversions

    def __iter__(self) -> Iterator[str]:
        return iter(self._conversions)

    def __len__(self) -> int:
        return len(self._conversions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LockState):
            return self._conversions == other._conversions
        return NotImplemented

    def __repr__(self) -> str:
        return f"LockState({self._conversions!r})"
