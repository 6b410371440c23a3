"""Application use-cases orchestrating conversion runs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from rlcp.application.decisions import resolve_candidate
from rlcp.application.executor import execute_conversion
from rlcp.application.lock_state import LockState
from rlcp.application.options import ConversionOptions
from rlcp.application.ports import AssetDiscoverer, ImageCodec, LockRepository
from rlcp.application.replacements import build_replacement_table
from rlcp.application.results import CandidateOutcome, RewriteReport, RunSummary
from rlcp.errors import ConversionError
from rlcp.references import update_references

logger = logging.getLogger(__name__)


def process_candidates(
    candidates: Sequence[str],
    lock: LockState,
    options: ConversionOptions,
    codec: ImageCodec,
    root: Path,
) -> list[CandidateOutcome]:
    """Decide and, where required, convert each candidate in order.

    Failures are logged and recorded per candidate; the loop always runs to
    completion.
    """
    outcomes: list[CandidateOutcome] = []
    for candidate in candidates:
        decision = resolve_candidate(
            candidate, lock, options, exists=lambda path: (root / path).exists()
        )
        if not decision.disposition.needs_conversion:
            outcomes.append(
                CandidateOutcome(candidate, decision.disposition, target=decision.target)
            )
            continue
        try:
            target = execute_conversion(decision, lock, codec, options, root)
        except ConversionError as exc:
            logger.error("Failed: %s (%s): %s", candidate, exc.step, exc)
            outcomes.append(CandidateOutcome(candidate, decision.disposition, error=str(exc)))
            continue
        outcomes.append(CandidateOutcome(candidate, decision.disposition, target=target))
    return outcomes


def run_conversion(
    *,
    root: Path,
    options: ConversionOptions,
    discoverer: AssetDiscoverer,
    codec: ImageCodec,
    lock_store: LockRepository,
    working_dir: Path | None = None,
) -> RunSummary:
    """Use-case: convert discovered assets and rewrite references to them.

    Parameters
    ----------
    root : Path
        Run root; all candidate and lock paths are relative to it.
    options : ConversionOptions
        Validated run settings.
    discoverer : AssetDiscoverer
        Source of candidates.
    codec : ImageCodec
        Encoder for conversions.
    lock_store : LockRepository
        Lock persistence; loaded once and saved once.
    working_dir : Path | None, default=None
        Tree whose text files are rewritten.  ``None`` skips rewriting.

    Returns
    -------
    RunSummary
        Per-candidate outcomes, the rebuilt replacement table and the
        rewrite report.
    """
    lock = lock_store.load()
    candidates = discoverer.discover(root, options.input_dir, options.blacklists)
    logger.info("Found %d images in %s", len(candidates), options.input_dir)

    outcomes = process_candidates(candidates, lock, options, codec, root)

    rules = build_replacement_table(lock, options.input_dir)
    lock_saved = lock_store.save(lock)

    rewrite: RewriteReport | None = None
    if working_dir is not None and rules:
        if working_dir.is_dir():
            rewrite = update_references(working_dir, rules, root=root)
        else:
            logger.warning(
                'Working directory "%s" does not exist. Skipping reference updates.',
                working_dir,
            )
    return RunSummary(
        outcomes=outcomes,
        rules=rules,
        rewrite=rewrite,
        lock_saved=lock_saved,
    )
