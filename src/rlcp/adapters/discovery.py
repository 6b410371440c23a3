"""Filesystem discovery of candidate image assets."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Sequence
from pathlib import Path

from rlcp.types import IMAGE_EXTENSIONS


class GlobAssetDiscoverer:
    """Walk an input root and return image files that are not blacklisted."""

    def __init__(self, extensions: Sequence[str] = IMAGE_EXTENSIONS) -> None:
        self.suffixes = frozenset(f".{ext}" for ext in extensions)

    def discover(
        self,
        root: Path,
        input_dir: str,
        blacklists: Sequence[str],
    ) -> list[str]:
        """Return candidate paths relative to ``root``.

        Parameters
        ----------
        root : Path
            Run root; returned paths are relative to it.
        input_dir : str
            Input root relative to ``root``.
        blacklists : Sequence[str]
            Glob patterns matched against the relative paths.  ``*`` stays
            within one path segment and ``**`` spans any number of segments.

        Returns
        -------
        list[str]
            Sorted POSIX paths.  Hidden files and directories are skipped and
            extensions are matched case-sensitively.
        """
        base = root / input_dir
        if not base.is_dir():
            return []
        patterns = [_strip_dot_prefix(pattern).split("/") for pattern in blacklists]
        found: list[str] = []
        for dirpath, dirnames, filenames in os.walk(base):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            for filename in filenames:
                if filename.startswith(".") or Path(filename).suffix not in self.suffixes:
                    continue
                relative = Path(os.path.relpath(Path(dirpath) / filename, root)).as_posix()
                parts = relative.split("/")
                if any(_match_segments(parts, pattern) for pattern in patterns):
                    continue
                found.append(relative)
        return sorted(found)


def _strip_dot_prefix(pattern: str) -> str:
    while pattern.startswith("./"):
        pattern = pattern[2:]
    return pattern


def _match_segments(parts: list[str], pattern: list[str]) -> bool:
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_segments(parts[index:], rest) for index in range(len(parts) + 1))
    return bool(parts) and fnmatch.fnmatchcase(parts[0], head) and _match_segments(parts[1:], rest)
