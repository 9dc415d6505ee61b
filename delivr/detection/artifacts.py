"""Build output detection per platform.

Each detector walks an ordered list of candidate directories and keeps the
ones that:

1. exist as directories,
2. were modified within the freshness window,
3. contain at least one entry matching the platform's bundle signature.

``detect`` returns the first candidate that passes, in template order.
``most_recent`` looks at every candidate and returns the newest one; ties go
to the earlier candidate.

When the project uses Expo, the Expo templates are tried before the standard
ones. The standard templates are always part of the list.
"""

from __future__ import annotations

import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from delivr.platform.paths import xcode_derived_data_dir

from .constants import (
    ANDROID_BUILD_TEMPLATES,
    EXPO_ANDROID_TEMPLATES,
    EXPO_IOS_TEMPLATES,
    IOS_BUILD_TEMPLATES,
    XCODE_PROJECT_SUFFIXES,
)
from .types import (
    DetectionCandidate,
    DetectionResult,
    DetectionSettings,
    DetectionSource,
    Platform,
)

__all__ = [
    "AndroidArtifactDetector",
    "ArtifactDetector",
    "IosArtifactDetector",
    "detector_for",
    "xcode_project_name",
]


@dataclass(frozen=True, slots=True)
class _Hit:
    result: DetectionResult
    mtime: float


class ArtifactDetector(ABC):
    """Template-driven detector; subclasses supply templates and signature."""

    platform: ClassVar[Platform]
    platform_source: ClassVar[DetectionSource]
    base_templates: ClassVar[tuple[str, ...]]
    expo_templates: ClassVar[tuple[str, ...]]

    def __init__(self, settings: DetectionSettings | None = None) -> None:
        self.settings = settings or DetectionSettings()

    def candidates(self, is_expo: bool) -> list[DetectionCandidate]:
        expo = [DetectionCandidate(self.platform, True, t) for t in self.expo_templates]
        base = [DetectionCandidate(self.platform, False, t) for t in self.base_templates]
        return [*expo, *base] if is_expo else base

    def expand(self, candidate: DetectionCandidate) -> tuple[str, ...]:
        return (candidate.template,)

    def candidate_paths(self, is_expo: bool) -> list[tuple[DetectionCandidate, str]]:
        """Expanded relative paths in evaluation order, without duplicates."""
        seen: set[str] = set()
        out: list[tuple[DetectionCandidate, str]] = []
        for candidate in self.candidates(is_expo):
            for relative in self.expand(candidate):
                if relative in seen:
                    continue
                seen.add(relative)
                out.append((candidate, relative))
        return out

    @abstractmethod
    def matches_signature(self, name: str) -> bool:
        """True if a directory entry name looks like a bundle output."""
        ...

    def has_bundle_files(self, directory: Path) -> bool:
        try:
            names = os.listdir(directory)
        except OSError:
            return False
        return any(self.matches_signature(name) for name in names)

    def describe(self, expo: bool, *, most_recent: bool = False) -> str:
        kind = "Expo" if expo else "standard"
        suffix = ", most recent" if most_recent else ""
        return f"{self.platform.display_name} build output ({kind}{suffix})"

    def _check(self, project_root: Path, candidate: DetectionCandidate, relative: str) -> _Hit | None:
        full = project_root / relative
        try:
            st = full.stat()
        except OSError:
            return None
        if not stat.S_ISDIR(st.st_mode):
            return None
        if not self.settings.is_fresh(st.st_mtime):
            return None
        if not self.has_bundle_files(full):
            return None
        result = DetectionResult(
            detected=True,
            path=full,
            description=self.describe(candidate.expo),
            source=DetectionSource.EXPO_BUILD if candidate.expo else self.platform_source,
        )
        return _Hit(result, st.st_mtime)

    def fallback(self, project_root: Path, is_expo: bool) -> DetectionResult | None:
        """Last resort after every template failed. None by default."""
        return None

    def detect(self, project_root: Path, is_expo: bool) -> DetectionResult | None:
        for candidate, relative in self.candidate_paths(is_expo):
            hit = self._check(project_root, candidate, relative)
            if hit is not None:
                return hit.result
        return self.fallback(project_root, is_expo)

    def most_recent(self, project_root: Path, is_expo: bool) -> DetectionResult | None:
        best: _Hit | None = None
        best_expo = False
        for candidate, relative in self.candidate_paths(is_expo):
            hit = self._check(project_root, candidate, relative)
            if hit is not None and (best is None or hit.mtime > best.mtime):
                best, best_expo = hit, candidate.expo
        if best is None:
            return self.fallback(project_root, is_expo)
        return DetectionResult(
            detected=True,
            path=best.result.path,
            description=self.describe(best_expo, most_recent=True),
            source=best.result.source,
        )


class AndroidArtifactDetector(ArtifactDetector):
    platform = Platform.ANDROID
    platform_source = DetectionSource.ANDROID_BUILD
    base_templates = ANDROID_BUILD_TEMPLATES
    expo_templates = EXPO_ANDROID_TEMPLATES

    def expand(self, candidate: DetectionCandidate) -> tuple[str, ...]:
        return candidate.expand(self.settings.android_variants)

    def matches_signature(self, name: str) -> bool:
        return ".bundle" in name or "index.android" in name or name in ("assets", "res")


class IosArtifactDetector(ArtifactDetector):
    platform = Platform.IOS
    platform_source = DetectionSource.IOS_BUILD
    base_templates = IOS_BUILD_TEMPLATES
    expo_templates = EXPO_IOS_TEMPLATES

    def matches_signature(self, name: str) -> bool:
        return name.endswith(".app") or ".jsbundle" in name or "main." in name or name == "assets"

    def fallback(self, project_root: Path, is_expo: bool) -> DetectionResult | None:
        if is_expo:
            return None
        return self._derived_data(project_root)

    def _derived_data(self, project_root: Path) -> DetectionResult | None:
        """Newest fresh Build/Products dir in Xcode DerivedData for this project."""
        derived_data = self.settings.derived_data_dir or xcode_derived_data_dir()
        name = xcode_project_name(project_root / "ios")
        if name is None:
            return None
        try:
            folders = sorted(derived_data.iterdir())
        except OSError:
            return None

        best: tuple[Path, float] | None = None
        for folder in folders:
            if not folder.name.startswith(name):
                continue
            products = folder / "Build" / "Products"
            try:
                mtime = products.stat().st_mtime
            except OSError:
                continue
            if not self.settings.is_fresh(mtime):
                continue
            if best is None or mtime > best[1]:
                best = (products, mtime)

        if best is None:
            return None
        return DetectionResult(
            detected=True,
            path=best[0],
            description="iOS build output (DerivedData)",
            source=DetectionSource.IOS_BUILD,
        )


def xcode_project_name(ios_dir: Path) -> str | None:
    """Base name of the first .xcodeproj/.xcworkspace in ios_dir."""
    try:
        names = sorted(os.listdir(ios_dir))
    except OSError:
        return None
    for entry in names:
        for suffix in XCODE_PROJECT_SUFFIXES:
            if entry.endswith(suffix):
                return entry[: -len(suffix)]
    return None


_DETECTORS: dict[Platform, type[ArtifactDetector]] = {
    Platform.ANDROID: AndroidArtifactDetector,
    Platform.IOS: IosArtifactDetector,
}


def detector_for(platform: Platform | str, settings: DetectionSettings | None = None) -> ArtifactDetector:
    """Build the detector for a platform.

    Raises:
        UnsupportedPlatformError: If platform is not android or ios.
    """
    return _DETECTORS[Platform.parse(platform)](settings)
