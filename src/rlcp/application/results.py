"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rlcp.application.decisions import Disposition
from rlcp.application.replacements import ReplacementRule


@dataclass(frozen=True)
class CandidateOutcome:
    """What happened to one candidate during a run."""

    candidate: str
    disposition: Disposition
    target: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.disposition.needs_conversion and self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class RewriteReport:
    """Files touched by the reference rewriter."""

    updated_files: list[Path] = field(default_factory=list)
    failed_files: list[Path] = field(default_factory=list)


@dataclass(frozen=True)
class RunSummary:
    """Structured outcome of a conversion run."""

    outcomes: list[CandidateOutcome]
    rules: list[ReplacementRule]
    rewrite: RewriteReport | None = None
    lock_saved: bool = True

    @property
    def discovered(self) -> int:
        return len(self.outcomes)

    @property
    def converted(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.failed)

    @property
    def skipped(self) -> int:
        return sum(
            1 for outcome in self.outcomes if not outcome.disposition.needs_conversion
        )

    @property
    def updated_files(self) -> int:
        return len(self.rewrite.updated_files) if self.rewrite else 0
