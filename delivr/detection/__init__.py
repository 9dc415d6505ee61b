"""Build output detection engine."""

from .artifacts import (
    AndroidArtifactDetector,
    ArtifactDetector,
    IosArtifactDetector,
    detector_for,
)
from .project import detect_expo
from .resolver import (
    default_output_dir,
    format_detection_message,
    resolve_output_path,
    standardized_output_path,
)
from .types import (
    DetectionCandidate,
    DetectionResult,
    DetectionSettings,
    DetectionSource,
    Platform,
    ProjectInfo,
)

__all__ = [
    # types
    "DetectionCandidate",
    "DetectionResult",
    "DetectionSettings",
    "DetectionSource",
    "Platform",
    "ProjectInfo",
    # detectors
    "AndroidArtifactDetector",
    "ArtifactDetector",
    "IosArtifactDetector",
    "detect_expo",
    "detector_for",
    # resolver
    "default_output_dir",
    "format_detection_message",
    "resolve_output_path",
    "standardized_output_path",
]
