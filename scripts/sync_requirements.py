#!/usr/bin/env python3
"""Write or verify requirements.txt from the pyproject.toml declarations."""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
SYNC_EXTRAS = ("test",)
HEADER = (
    "# Generated from pyproject.toml (base + extras: test)\n"
    "# Do not edit manually; run: python scripts/sync_requirements.py\n"
)


def declared_requirements() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    for extra in SYNC_EXTRAS:
        deps.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def pinned_requirements() -> list[str]:
    if not REQUIREMENTS.exists():
        return []
    lines = (line.split("#", 1)[0].strip() for line in REQUIREMENTS.read_text(encoding="utf-8").splitlines())
    return sorted(line for line in lines if line)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--check", action="store_true", help="Fail instead of rewriting when out of sync.")
    args = parser.parse_args()

    expected = declared_requirements()
    if not args.check:
        REQUIREMENTS.write_text(HEADER + "\n".join(expected) + "\n", encoding="utf-8")
        print(f"Wrote {len(expected)} requirements to {REQUIREMENTS.name}")
        return

    actual = pinned_requirements()
    missing = sorted(set(expected) - set(actual))
    unexpected = sorted(set(actual) - set(expected))
    if missing or unexpected:
        lines = ["requirements.txt is out of sync with pyproject.toml."]
        lines += [f"- missing: {entry}" for entry in missing]
        lines += [f"- unexpected: {entry}" for entry in unexpected]
        lines.append("Run: python scripts/sync_requirements.py")
        raise SystemExit("\n".join(lines))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
