"""Types for build output detection."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path

from delivr.core.errors import UnsupportedPlatformError

from .constants import ANDROID_VARIANTS, MAX_BUILD_AGE, VARIANT_PLACEHOLDER

__all__ = [
    "DetectionCandidate",
    "DetectionResult",
    "DetectionSettings",
    "DetectionSource",
    "Platform",
    "ProjectInfo",
]


class Platform(Enum):
    ANDROID = "android"
    IOS = "ios"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return "Android" if self is Platform.ANDROID else "iOS"

    @classmethod
    def parse(cls, value: Platform | str) -> Platform:
        """Accept a Platform or its string value.

        Raises:
            UnsupportedPlatformError: For anything else.
        """
        if isinstance(value, Platform):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedPlatformError(value)


class DetectionSource(Enum):
    ANDROID_BUILD = "android_build"
    IOS_BUILD = "ios_build"
    EXPO_BUILD = "expo_build"
    USER_PROVIDED = "user_provided"
    DEFAULT_FALLBACK = "default_fallback"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Where bundles should go, and how that was decided.

    ``detected`` is True only when an existing build output was found.
    """

    detected: bool
    path: Path
    description: str
    source: DetectionSource


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    is_expo: bool
    project_root: Path
    react_native_version: str | None = None


@dataclass(frozen=True, slots=True)
class DetectionCandidate:
    """One place a build output might live, relative to the project root."""

    platform: Platform
    expo: bool
    template: str

    def expand(self, variants: Iterable[str]) -> tuple[str, ...]:
        if VARIANT_PLACEHOLDER not in self.template:
            return (self.template,)
        return tuple(self.template.replace(VARIANT_PLACEHOLDER, v) for v in variants)


@dataclass(frozen=True, slots=True)
class DetectionSettings:
    """Tunable detection heuristics.

    Attributes:
        freshness_window: Maximum age of a build directory.
        android_variants: Variant names substituted into Android templates.
        derived_data_dir: Xcode DerivedData location (default: under HOME).
        clock: Returns the current time in seconds since the epoch.
    """

    freshness_window: timedelta = MAX_BUILD_AGE
    android_variants: tuple[str, ...] = ANDROID_VARIANTS
    derived_data_dir: Path | None = None
    clock: Callable[[], float] = time.time

    def is_fresh(self, mtime: float) -> bool:
        return self.clock() - mtime <= self.freshness_window.total_seconds()
