"""Per-candidate conversion decisions."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rlcp.application.lock_state import LockState
from rlcp.application.options import ConversionOptions

logger = logging.getLogger(__name__)

PathExists = Callable[[str], bool]


class Disposition(Enum):
    """Classification of a discovered candidate."""

    CONVERT_NOW = "convert"
    RECONVERT_MISSING_TARGET = "reconvert"
    SKIP_ALREADY_CONVERTED = "already-converted"
    SKIP_GENERATED_ARTIFACT = "generated"
    SKIP_BACKUP_EXISTS = "backup-exists"

    @property
    def needs_conversion(self) -> bool:
        return self in (Disposition.CONVERT_NOW, Disposition.RECONVERT_MISSING_TARGET)

    @property
    def reason(self) -> str:
        return _REASONS[self]


_REASONS = {
    Disposition.CONVERT_NOW: "Needs conversion",
    Disposition.RECONVERT_MISSING_TARGET: "Converted file missing",
    Disposition.SKIP_ALREADY_CONVERTED: "Already converted",
    Disposition.SKIP_GENERATED_ARTIFACT: "Generated file",
    Disposition.SKIP_BACKUP_EXISTS: "Backup exists",
}


@dataclass(frozen=True)
class Decision:
    """Evaluated disposition and the paths it was computed from.

    Attributes
    ----------
    candidate : str
        Candidate path relative to the run root.
    disposition : Disposition
        Outcome of the evaluation.
    backup_path : str
        Where the original is (or would be) kept under the backup root.
    final_path : str
        Where the converted asset is (or would be) written.
    target : str | None
        Converted path to reference in place of the candidate, for
        dispositions that resolve to one.
    """

    candidate: str
    disposition: Disposition
    backup_path: str
    final_path: str
    target: str | None = None


def backup_path_for(candidate: str, options: ConversionOptions) -> str:
    """Mirror ``candidate``'s sub-path under the input root into the backup root."""
    sub_path = posixpath.relpath(candidate, options.input_dir)
    return posixpath.normpath(posixpath.join(options.output_dir, sub_path))


def final_path_for(candidate: str, options: ConversionOptions) -> str:
    """Return the converted sibling path for ``candidate``."""
    directory, name = posixpath.split(candidate)
    stem, _ext = posixpath.splitext(name)
    return posixpath.join(directory, stem + options.target_extension)


def decide(
    candidate: str,
    lock: LockState,
    options: ConversionOptions,
    exists: PathExists,
) -> Decision:
    """Classify ``candidate`` without side effects.

    Parameters
    ----------
    candidate : str
        Discovered asset path relative to the run root.
    lock : LockState
        Current lock state; not modified.
    options : ConversionOptions
        Run settings (input/output roots and target format).
    exists : Callable[[str], bool]
        Predicate reporting whether a root-relative path exists on disk.

    Returns
    -------
    Decision
        Evaluated disposition.  A lock entry whose target is missing falls
        through the remaining checks and, if nothing else applies, yields
        ``RECONVERT_MISSING_TARGET``.
    """
    backup_path = backup_path_for(candidate, options)
    final_path = final_path_for(candidate, options)

    def _decision(disposition: Disposition, target: str | None = None) -> Decision:
        return Decision(
            candidate=candidate,
            disposition=disposition,
            backup_path=backup_path,
            final_path=final_path,
            target=target,
        )

    locked_target = lock.get(candidate)
    if locked_target is not None and exists(locked_target):
        return _decision(Disposition.SKIP_ALREADY_CONVERTED, locked_target)

    if lock.is_generated(candidate):
        return _decision(Disposition.SKIP_GENERATED_ARTIFACT)

    if exists(backup_path) and exists(final_path):
        return _decision(Disposition.SKIP_BACKUP_EXISTS, final_path)

    if locked_target is not None:
        return _decision(Disposition.RECONVERT_MISSING_TARGET)
    return _decision(Disposition.CONVERT_NOW)


def resolve_candidate(
    candidate: str,
    lock: LockState,
    options: ConversionOptions,
    exists: PathExists,
) -> Decision:
    """Classify ``candidate`` and repair the lock for recovered conversions.

    A ``SKIP_BACKUP_EXISTS`` decision means an earlier run converted the asset
    but its lock entry was lost, so the entry is written back here.
    """
    decision = decide(candidate, lock, options, exists)
    if decision.disposition is Disposition.SKIP_BACKUP_EXISTS:
        lock.record(candidate, decision.final_path)
    if not decision.disposition.needs_conversion:
        logger.warning("Skipping: %s (%s)", candidate, decision.disposition.reason)
    elif decision.disposition is Disposition.RECONVERT_MISSING_TARGET:
        logger.info(
            "Reconverting: %s (%s was removed)", candidate, lock.get(candidate)
        )
    return decision
