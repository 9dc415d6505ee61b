"""Constants for build output detection.

Candidate templates are relative to the project root. ``{variant}`` is
replaced by each Android build variant name in turn.
"""

from __future__ import annotations

from datetime import timedelta

# Visible on purpose (no leading dot) so bundles show up in plain listings.
DEFAULT_OUTPUT_BASE = "dota/bundles"

VARIANT_PLACEHOLDER = "{variant}"

ANDROID_VARIANTS: tuple[str, ...] = ("release", "debug", "staging")

ANDROID_BUILD_TEMPLATES: tuple[str, ...] = (
    "android/app/build/generated/assets/react/{variant}",
    "android/app/build/intermediates/assets/{variant}",
    "android/app/build/generated/res/react/{variant}",
)

EXPO_ANDROID_TEMPLATES: tuple[str, ...] = (
    ".expo/android/app/build/generated/assets/react/{variant}",
)

IOS_BUILD_TEMPLATES: tuple[str, ...] = (
    "ios/build/Build/Products/Release-iphonesimulator",
    "ios/build/Build/Products/Debug-iphonesimulator",
    "ios/build/Build/Products/Release-iphoneos",
    "ios/build/Build/Products/Debug-iphoneos",
    "ios/build",
)

EXPO_IOS_TEMPLATES: tuple[str, ...] = (".expo/ios/build",)

XCODE_PROJECT_SUFFIXES: tuple[str, ...] = (".xcodeproj", ".xcworkspace")

# Older build directories are treated as stale.
MAX_BUILD_AGE = timedelta(hours=24)

EXPO_CONFIG_FILES: tuple[str, ...] = ("app.json", "app.config.js", "app.config.ts")
EXPO_DEPENDENCY_NAMES: tuple[str, ...] = ("expo", "expo-cli")
REACT_NATIVE_DEPENDENCY_NAME = "react-native"
PACKAGE_JSON_FILE = "package.json"
PACKAGE_JSON_DEP_KEYS: tuple[str, ...] = ("dependencies", "devDependencies")
