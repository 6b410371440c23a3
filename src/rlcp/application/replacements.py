"""Replacement table construction from lock state."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from rlcp.application.lock_state import LockState


@dataclass(frozen=True)
class ReplacementRule:
    """Literal ``old`` to ``new`` path substitution."""

    old: str
    new: str


def rules_for(original: str, target: str, input_dir: str) -> list[ReplacementRule]:
    """Return the rules covering one converted asset.

    The first rule uses paths relative to the input root.  A second rule with
    run-root relative paths is added when that form differs.
    """
    old_rel = posixpath.relpath(original, input_dir)
    new_rel = posixpath.relpath(target, input_dir)
    rules = [ReplacementRule(old=old_rel, new=new_rel)]
    if original != old_rel:
        rules.append(ReplacementRule(old=original, new=target))
    return rules


def build_replacement_table(lock: LockState, input_dir: str) -> list[ReplacementRule]:
    """Build the complete replacement table from the final lock state.

    Entries from earlier runs are included even when their source no longer
    exists under the input root.
    """
    table: list[ReplacementRule] = []
    for original, target in lock.items():
        table.extend(rules_for(original, target, input_dir))
    return table
