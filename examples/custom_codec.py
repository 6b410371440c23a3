"""Plug a custom image codec into a conversion run.

The codec below shells out to ``cwebp`` when it is on PATH and falls back to
Pillow otherwise.

Usage:
  uv run python examples/custom_codec.py path/to/project
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

from rlcp.adapters.codecs import PillowImageCodec
from rlcp.api import convert_assets
from rlcp.errors import CodecError
from rlcp.types import TargetFormat


class CwebpCodec:
    """Encode WebP with the ``cwebp`` binary, other formats with Pillow."""

    def __init__(self) -> None:
        self.binary = shutil.which("cwebp")
        self.fallback = PillowImageCodec()

    def encode(
        self,
        source: Path,
        destination: Path,
        target_format: TargetFormat,
        quality: int,
    ) -> None:
        if target_format != "webp" or self.binary is None:
            self.fallback.encode(source, destination, target_format, quality)
            return
        result = subprocess.run(
            [self.binary, "-quiet", "-q", str(quality), str(source), "-o", str(destination)],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            raise CodecError(result.stderr.strip() or f"cwebp exited with {result.returncode}")


def main() -> None:
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    summary = convert_assets(root, target_format="webp", codec=CwebpCodec())
    print(
        f"converted={summary.converted} skipped={summary.skipped} "
        f"failed={summary.failed} updated_files={summary.updated_files}"
    )


if __name__ == "__main__":
    main()
