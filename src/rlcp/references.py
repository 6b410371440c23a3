"""Rewrite textual references to converted assets."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from rlcp.application.replacements import ReplacementRule
from rlcp.application.results import RewriteReport
from rlcp.matcher import replace_path
from rlcp.types import IGNORED_DIRECTORIES, TEXT_EXTENSIONS

logger = logging.getLogger(__name__)


def sort_rules(rules: Iterable[ReplacementRule]) -> list[ReplacementRule]:
    """Order rules longest ``old`` path first so specific paths win."""
    return sorted(rules, key=lambda rule: len(rule.old), reverse=True)


def iter_text_files(
    working_dir: Path,
    extensions: Sequence[str] = TEXT_EXTENSIONS,
) -> Iterator[Path]:
    """Yield source files eligible for rewriting, in a stable order.

    Dependency, build and hidden directories are not entered, and hidden
    files are never yielded.
    """
    suffixes = {f".{ext}" for ext in extensions}
    for dirpath, dirnames, filenames in os.walk(working_dir):
        dirnames[:] = sorted(
            d for d in dirnames if d not in IGNORED_DIRECTORIES and not d.startswith(".")
        )
        for filename in sorted(filenames):
            if filename.startswith("."):
                continue
            path = Path(dirpath) / filename
            if path.suffix in suffixes:
                yield path


def rewrite_text(text: str, rules: Sequence[ReplacementRule]) -> tuple[str, bool]:
    """Apply ``rules`` in order to ``text``.

    Returns
    -------
    tuple[str, bool]
        Rewritten text and whether any rule matched.
    """
    changed = False
    for rule in rules:
        text, count = replace_path(text, rule.old, rule.new)
        if count:
            changed = True
    return text, changed


def rewrite_file(path: Path, rules: Sequence[ReplacementRule]) -> bool:
    """Rewrite one file in place; return whether it changed.

    Raises
    ------
    OSError, UnicodeError
        If the file cannot be read, decoded or written.
    """
    with path.open("r", encoding="utf-8", newline="") as handle:
        content = handle.read()
    updated, changed = rewrite_text(content, rules)
    if changed:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(updated)
    return changed


def update_references(
    working_dir: Path,
    rules: Iterable[ReplacementRule],
    *,
    root: Path | None = None,
) -> RewriteReport:
    """Rewrite references to converted assets under ``working_dir``.

    Parameters
    ----------
    working_dir : Path
        Directory tree to scan for text files.
    rules : Iterable[ReplacementRule]
        Replacement table; sorted longest-first before use.
    root : Path | None, default=None
        Base used to shorten paths in log messages.

    Returns
    -------
    RewriteReport
        Files that were rewritten and files that could not be processed.
    """
    ordered = sort_rules(rules)
    report = RewriteReport()
    if not ordered:
        return report

    logger.debug("Updating references in %s", working_dir)
    for path in iter_text_files(working_dir):
        try:
            changed = rewrite_file(path, ordered)
        except (OSError, UnicodeError) as exc:
            logger.error("Error updating file %s: %s", path, exc)
            report.failed_files.append(path)
            continue
        if changed:
            logger.info("Updated references in: %s", _display(path, root))
            report.updated_files.append(path)
    return report


def _display(path: Path, root: Path | None) -> str:
    if root is None:
        return str(path)
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
