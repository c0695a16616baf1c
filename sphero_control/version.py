#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/version.py
------------------------------------------
Version and package metadata helpers for the `sphero_control` package.

Purpose
-------
Provide a single source of truth for package version strings that can be
imported by:
- controller startup logs
- diagnostics / tuning tools
- tests

Design notes
------------
- No external dependencies.
- Semantic-version style fields exposed for tooling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


# =============================================================================
# Semantic Version (edit here for releases)
# =============================================================================
VERSION_MAJOR: Final[int] = 0
VERSION_MINOR: Final[int] = 1
VERSION_PATCH: Final[int] = 0

# Optional prerelease tag (SemVer-style), e.g. "rc.1"
PRERELEASE: Final[str] = ""


# =============================================================================
# Package Identity Metadata
# =============================================================================
PACKAGE_NAME: Final[str] = "sphero_control"
ROBOT_NAME: Final[str] = "Sphero"


def _build_version_string() -> str:
    base = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
    if PRERELEASE.strip():
        base += f"-{PRERELEASE.strip()}"
    return base


__version__: Final[str] = _build_version_string()
VERSION: Final[str] = __version__


@dataclass(frozen=True)
class PackageVersionInfo:
    package_name: str
    robot_name: str
    version: str
    major: int
    minor: int
    patch: int
    prerelease: str

    def to_dict(self) -> dict:
        return {
            "package_name": self.package_name,
            "robot_name": self.robot_name,
            "version": self.version,
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": self.prerelease or None,
        }

    def short(self) -> str:
        return f"{self.package_name} {self.version}"


def get_version() -> str:
    """Return package version string (SemVer-style)."""
    return VERSION


def get_package_version_info() -> PackageVersionInfo:
    """Return structured package version metadata."""
    return PackageVersionInfo(
        package_name=PACKAGE_NAME,
        robot_name=ROBOT_NAME,
        version=VERSION,
        major=VERSION_MAJOR,
        minor=VERSION_MINOR,
        patch=VERSION_PATCH,
        prerelease=PRERELEASE,
    )


__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "ROBOT_NAME",
    "PackageVersionInfo",
    "get_version",
    "get_package_version_info",
]
