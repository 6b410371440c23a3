"""Keep the backup root out of version control."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def is_ignored(content: str, directory: str) -> bool:
    """Check whether ``content`` already lists ``directory`` on its own line."""
    accepted = {directory, f"/{directory}", f"{directory}/", f"/{directory}/"}
    return any(line.strip() in accepted for line in content.split("\n"))


def ensure_gitignore(root: Path, output_dir: str) -> bool:
    """Append ``output_dir`` to ``root/.gitignore`` unless already listed.

    Returns
    -------
    bool
        ``True`` when the file was modified.  I/O failures are logged and
        reported as ``False``.
    """
    path = root / ".gitignore"
    try:
        content = path.read_text(encoding="utf-8") if path.exists() else ""
        if is_ignored(content, output_dir):
            return False
        logger.info('Adding "%s" to .gitignore', output_dir)
        separator = "" if content == "" or content.endswith("\n") else "\n"
        path.write_text(f"{content}{separator}{output_dir}\n", encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error checking/updating .gitignore: %s", exc)
        return False
    return True
