"""Minimal end-to-end example using the public rlcp API.

Creates a throwaway project with two PNG icons and a page referencing them,
converts the icons to WebP and prints the rewritten page.

Usage:
  uv run python examples/convert_project_assets.py
"""

from __future__ import annotations

import json
from pathlib import Path
from tempfile import TemporaryDirectory

from PIL import Image

from rlcp import convert_assets


def _build_project(root: Path) -> Path:
    icons = root / "public" / "icons"
    icons.mkdir(parents=True)
    for name, color in (("logo.png", (200, 30, 30)), ("menu.png", (30, 30, 200))):
        Image.new("RGB", (32, 32), color).save(icons / name)

    page = root / "src" / "index.html"
    page.parent.mkdir()
    page.write_text(
        '<img src="/icons/logo.png">\n<img src="public/icons/menu.png">\n',
        encoding="utf-8",
    )
    (root / "rlcp.config.json").write_text(
        json.dumps(
            {
                "input": "public",
                "output": "public_originals",
                "preferred_type": "webp",
                "file_size": "small",
                "working_directory": "src",
            }
        ),
        encoding="utf-8",
    )
    return page


def main() -> None:
    """Run a conversion twice and show that the second run is a no-op."""
    with TemporaryDirectory(prefix="rlcp-example-") as tmp:
        root = Path(tmp)
        page = _build_project(root)

        first = convert_assets(root)
        print(f"first run: converted={first.converted} skipped={first.skipped}")
        print(page.read_text(encoding="utf-8"))

        second = convert_assets(root)
        print(f"second run: converted={second.converted} skipped={second.skipped}")
        print((root / "rlcp.lock").read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
