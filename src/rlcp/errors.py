"""Exception hierarchy for rlcp."""

from __future__ import annotations


class RlcpError(Exception):
    """Base error for all rlcp failures."""

    exit_code: int = 1


class ConfigError(RlcpError):
    """Setup error raised before any file is touched."""


class ConversionError(RlcpError):
    """A single candidate could not be converted.

    Parameters
    ----------
    message : str
        Human-readable failure description.
    candidate : str | None, default=None
        Candidate path the failure belongs to.
    step : str | None, default=None
        Transition step that failed (``encode``, ``backup`` or ``rename``).
    """

    def __init__(
        self,
        message: str,
        *,
        candidate: str | None = None,
        step: str | None = None,
    ) -> None:
        super().__init__(message)
        self.candidate = candidate
        self.step = step


class CodecError(ConversionError):
    """The image codec failed to encode an asset."""


class UnsupportedFormatError(RlcpError):
    """Requested target format cannot be produced."""
