"""Boundary-aware literal path matching."""

from __future__ import annotations

import re

# Not preceded by a filename character, nor by a separator that follows one.
_BOUNDARY = r"(?<![\w\-.])(?<![\w\-.]/)"


def build_path_pattern(path: str) -> re.Pattern[str]:
    """Compile a pattern matching ``path`` only where it stands alone.

    An occurrence qualifies when the preceding character is not a word
    character, hyphen or period, and is not a ``/`` that itself follows one
    of those.  ``img.png`` therefore matches in ``"img.png"`` and
    ``"/img.png"`` but not in ``"bigimg.png"``, ``"other-img.png"`` or
    ``"other/img.png"``.

    Parameters
    ----------
    path : str
        Literal path string to search for.

    Returns
    -------
    re.Pattern[str]
        Compiled pattern; word characters are ASCII-only.
    """
    if not path:
        raise ValueError("path must be a non-empty string.")
    return re.compile(_BOUNDARY + re.escape(path), re.ASCII)


def replace_path(text: str, old: str, new: str) -> tuple[str, int]:
    """Replace every standalone occurrence of ``old`` with ``new``.

    Returns the rewritten text and the number of replacements made.
    """
    return build_path_pattern(old).subn(lambda _match: new, text)
