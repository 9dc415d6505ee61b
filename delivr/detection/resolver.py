"""Output path resolution.

Priority, first match wins:

1. A user-provided directory (made absolute against the project root).
   Auto-detection is not attempted at all in this case.
2. An auto-detected build output for the platform.
3. The default visible directory ``<project_root>/dota/bundles/<platform>``.

Only filesystem reads happen here; nothing is created or written.
"""

from __future__ import annotations

from pathlib import Path

from delivr.output.console import ConsoleProtocol, RichConsole, Style

from .artifacts import detector_for
from .constants import DEFAULT_OUTPUT_BASE
from .project import detect_expo
from .types import DetectionResult, DetectionSettings, DetectionSource, Platform

__all__ = [
    "default_output_dir",
    "format_detection_message",
    "resolve_output_path",
    "standardized_output_path",
]


def default_output_dir(project_root: Path | None = None) -> Path:
    """``<project_root>/dota/bundles``, without the platform segment."""
    return (project_root or Path.cwd()) / DEFAULT_OUTPUT_BASE


def standardized_output_path(platform: Platform | str, project_root: Path | None = None) -> Path:
    """Where bundles end up for a platform: ``<project_root>/dota/bundles/<platform>``.

    Raises:
        UnsupportedPlatformError: If platform is not android or ios.
    """
    return default_output_dir(project_root) / Platform.parse(platform).value


def resolve_output_path(
    platform: Platform | str,
    *,
    user_output_dir: str | Path | None = None,
    project_root: Path | None = None,
    verbose: bool = False,
    prefer_most_recent: bool = False,
    settings: DetectionSettings | None = None,
    console: ConsoleProtocol | None = None,
) -> DetectionResult:
    """Decide where bundles for platform should be written.

    Args:
        platform: "android" or "ios".
        user_output_dir: Explicit directory from the user. Empty means unset.
        project_root: Project root (default: current directory).
        verbose: Trace each step to the console.
        prefer_most_recent: Pick the newest valid build rather than the
            first one in template order.
        settings: Detection heuristics.
        console: Sink for verbose output (default: Rich on stdout).

    Raises:
        UnsupportedPlatformError: If platform is not android or ios.
    """
    target = Platform.parse(platform)
    root = (project_root or Path.cwd()).absolute()

    if user_output_dir:
        user_path = Path(user_output_dir)
        return DetectionResult(
            detected=False,
            path=user_path if user_path.is_absolute() else root / user_path,
            description="User-provided output directory",
            source=DetectionSource.USER_PROVIDED,
        )

    out = (console or RichConsole()) if verbose else None

    project = detect_expo(root)
    if out is not None:
        kind = "Expo" if project.is_expo else "Standard React Native"
        out.print(f"Project type: {kind}", Style.DIM)
        out.print(f"Searching for {target} build output...", Style.DIM)

    detector = detector_for(target, settings)
    if prefer_most_recent:
        detected = detector.most_recent(root, project.is_expo)
    else:
        detected = detector.detect(root, project.is_expo)

    if detected is not None:
        if out is not None:
            out.success(f"Detected: {detected.description}")
            out.print(f"  Path: {detected.path}", Style.DIM)
        return detected

    if out is not None:
        out.print("No build output detected, using default", Style.DIM)

    return DetectionResult(
        detected=False,
        path=standardized_output_path(target, root),
        description="Default visible directory",
        source=DetectionSource.DEFAULT_FALLBACK,
    )


def format_detection_message(result: DetectionResult) -> str:
    """Two-line summary of where bundles will be created."""
    status = "Detected" if result.detected else "Using"
    return f"{status}: {result.description}\n   Path: {result.path}"
