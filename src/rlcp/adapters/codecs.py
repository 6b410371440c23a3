"""Pillow-backed image codec implementing the application port."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rlcp.errors import CodecError, UnsupportedFormatError
from rlcp.types import TargetFormat

PIL_FORMATS: dict[str, str] = {
    "png": "PNG",
    "jpeg": "JPEG",
    "jpg": "JPEG",
    "webp": "WEBP",
}


def save_options(target_format: TargetFormat, quality: int) -> dict[str, Any]:
    """Return Pillow ``save`` keyword arguments for a target format.

    PNG is lossless, so ``quality`` only applies to JPEG and WebP.
    """
    if not 0 <= quality <= 100:
        raise ValueError("quality must be within [0, 100].")
    if target_format == "png":
        return {"optimize": True}
    if target_format in ("jpeg", "jpg"):
        return {"quality": quality, "optimize": True}
    if target_format == "webp":
        return {"quality": quality}
    raise UnsupportedFormatError(f"Unsupported target format '{target_format}'.")


class PillowImageCodec:
    """Encode images with Pillow."""

    def encode(
        self,
        source: Path,
        destination: Path,
        target_format: TargetFormat,
        quality: int,
    ) -> None:
        """Write ``source`` re-encoded as ``target_format`` to ``destination``.

        Parameters
        ----------
        source : Path
            Image to read.
        destination : Path
            Output path; its suffix is ignored when choosing the encoder.
        target_format : {"png", "jpeg", "jpg", "webp"}
            Output format.
        quality : int
            Encoder quality in ``[0, 100]``.

        Raises
        ------
        CodecError
            If Pillow cannot read or write the image.
        """
        from PIL import Image, UnidentifiedImageError

        options = save_options(target_format, quality)
        pil_format = PIL_FORMATS[target_format]
        try:
            with Image.open(source) as image:
                image.load()
                prepared = _prepare_mode(image, pil_format)
                prepared.save(destination, format=pil_format, **options)
        except (OSError, UnidentifiedImageError, ValueError) as exc:
            raise CodecError(f"Pillow could not encode {source.name}: {exc}") from exc


def _prepare_mode(image: Any, pil_format: str) -> Any:
    # JPEG has no alpha channel or palette support.
    if pil_format == "JPEG" and image.mode not in ("RGB", "L", "CMYK"):
        return image.convert("RGB")
    return image


def writable_formats() -> dict[str, bool]:
    """Report which target formats the installed Pillow can write."""
    from PIL import Image

    Image.init()
    return {name: PIL_FORMATS[name] in Image.SAVE for name in PIL_FORMATS}
