"""JSON persistence for the conversion lock state."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from rlcp.application.lock_state import LockState
from rlcp.schemas import LockFileModel
from rlcp.types import LOCK_FILE_NAME

logger = logging.getLogger(__name__)


class JsonLockStore:
    """Load and save ``rlcp.lock`` as indented JSON.

    No locking against concurrent writers is performed.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def for_root(cls, root: Path) -> JsonLockStore:
        """Return a store using the conventional lock file name under ``root``."""
        return cls(root / LOCK_FILE_NAME)

    def load(self) -> LockState:
        """Return the persisted lock state.

        A missing file yields an empty state.  Read or parse failures are
        logged and also yield an empty state.
        """
        if not self.path.exists():
            return LockState()
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            model = LockFileModel.model_validate(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.error("Error reading lock file %s: %s", self.path, exc)
            return LockState()
        return LockState(model.conversions)

    def save(self, state: LockState) -> bool:
        """Write ``state`` to disk; log and return ``False`` on failure."""
        model = LockFileModel(conversions=state.to_dict())
        try:
            self.path.write_text(
                json.dumps(model.model_dump(), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error("Error writing lock file %s: %s", self.path, exc)
            return False
        return True
