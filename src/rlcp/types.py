"""Shared type aliases and constants."""

from __future__ import annotations

from typing import Literal

type TargetFormat = Literal["png", "jpeg", "jpg", "webp"]
type QualityTier = Literal["small", "smallest"]

TARGET_FORMATS: tuple[str, ...] = ("png", "jpeg", "jpg", "webp")
QUALITY_TIERS: tuple[str, ...] = ("small", "smallest")
QUALITY_VALUES: dict[str, int] = {"small": 80, "smallest": 60}

IMAGE_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "webp")
TEXT_EXTENSIONS: tuple[str, ...] = (
    "html",
    "js",
    "jsx",
    "ts",
    "tsx",
    "css",
    "scss",
    "json",
    "md",
)
IGNORED_DIRECTORIES: frozenset[str] = frozenset({"node_modules", ".git", "dist", "build"})

CONFIG_FILE_NAME = "rlcp.config.json"
LOCK_FILE_NAME = "rlcp.lock"
TEMP_SUFFIX = ".temp"
