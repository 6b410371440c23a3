#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    cli_path = ROOT / "src/rlcp/cli/cli.py"
    _assert_no_imports(cli_path, ["import PIL", "from PIL"])

    app_dir = ROOT / "src/rlcp/application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import click",
                "import PIL",
                "from PIL",
                "rlcp.adapters",
                "rlcp.infrastructure",
                "rlcp.cli",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
