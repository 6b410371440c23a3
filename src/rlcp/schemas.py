"""Pydantic schemas for the configuration and lock files."""

from __future__ import annotations

import posixpath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rlcp.types import QualityTier, TargetFormat


class RlcpConfig(BaseModel):
    """Validated contents of ``rlcp.config.json``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    input: str
    output: str
    blacklists: list[str] = Field(default_factory=list)
    file_size: QualityTier | None = None
    preferred_type: TargetFormat | None = None
    working_directory: str | None = None

    @field_validator("input", "output")
    @classmethod
    def _validate_directory(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("directory must be a non-empty path.")
        return value

    @model_validator(mode="after")
    def _validate_distinct_roots(self) -> RlcpConfig:
        if posixpath.normpath(self.input) == posixpath.normpath(self.output):
            raise ValueError("'input' and 'output' must point to different directories.")
        return self


class LockFileModel(BaseModel):
    """On-disk shape of the lock file."""

    model_config = ConfigDict(extra="ignore")

    conversions: dict[str, str] = Field(default_factory=dict)
