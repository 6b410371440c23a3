"""Encode, back up and rename a single candidate."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from rlcp.application.decisions import Decision
from rlcp.application.lock_state import LockState
from rlcp.application.options import ConversionOptions
from rlcp.application.ports import ImageCodec
from rlcp.errors import CodecError, ConversionError
from rlcp.types import TEMP_SUFFIX

logger = logging.getLogger(__name__)


def temp_path_for(source: Path) -> Path:
    """Return the scratch path the encoder writes beside ``source``."""
    return source.with_name(source.name + TEMP_SUFFIX)


def execute_conversion(
    decision: Decision,
    lock: LockState,
    codec: ImageCodec,
    options: ConversionOptions,
    root: Path,
) -> str:
    """Run the encode, backup and rename transition for one candidate.

    The steps run strictly in order.  A failed encode leaves the original
    untouched.  If the backup move succeeds but the final rename fails, the
    original stays in the backup root, no lock entry is written and the
    encoded temp file is left in place; the raised error names both paths.

    Parameters
    ----------
    decision : Decision
        Decision whose disposition requires conversion.
    lock : LockState
        Lock state, updated on success.
    codec : ImageCodec
        Encoder used for the first step.
    options : ConversionOptions
        Target format and quality.
    root : Path
        Run root that decision paths are relative to.

    Returns
    -------
    str
        Converted path relative to ``root``.

    Raises
    ------
    ConversionError
        If any step fails.
    """
    candidate = decision.candidate
    if not decision.disposition.needs_conversion:
        raise ConversionError(
            f"{candidate} does not need conversion ({decision.disposition.reason}).",
            candidate=candidate,
        )

    source = root / candidate
    temp = temp_path_for(source)
    backup = root / decision.backup_path
    final = root / decision.final_path

    try:
        codec.encode(source, temp, options.target_format, options.quality)
    except Exception as exc:
        temp.unlink(missing_ok=True)
        raise CodecError(
            f"could not encode as {options.target_format}: {exc}",
            candidate=candidate,
            step="encode",
        ) from exc

    try:
        backup.parent.mkdir(parents=True, exist_ok=True)
        if backup.exists():
            backup.unlink()
        shutil.move(source, backup)
    except OSError as exc:
        temp.unlink(missing_ok=True)
        raise ConversionError(
            f"could not move original to {decision.backup_path}: {exc}",
            candidate=candidate,
            step="backup",
        ) from exc

    try:
        temp.replace(final)
    except OSError as exc:
        raise ConversionError(
            f"original moved to {decision.backup_path} but {temp.name} could not "
            f"be renamed to {decision.final_path}: {exc}",
            candidate=candidate,
            step="rename",
        ) from exc

    lock.record(candidate, decision.final_path)
    logger.info("Processed: %s -> %s", candidate, decision.final_path)
    return decision.final_path
