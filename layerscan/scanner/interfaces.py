"""Collaborator interfaces consumed by the scanner.

Each is a single-method protocol so that database-backed implementations and
test doubles (see :mod:`layerscan.testing`) are interchangeable. Implementations
must be safe to call from several threads at once; the scanner itself never
synchronises access to them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from layerscan.scanner.models import (
    ArtifactDetail,
    DetectedVulnerability,
    Library,
    OSDetectResult,
    Package,
)


@runtime_checkable
class Applier(Protocol):
    """Merges an ordered list of layers into one artifact inventory."""

    def apply_layers(self, layer_ids: Sequence[str]) -> ArtifactDetail: ...


@runtime_checkable
class OspkgDetector(Protocol):
    """Matches installed OS packages against an OS vulnerability feed.

    Returns ``OSDetectResult.unsupported()`` when no feed covers the OS and
    raises on any other failure.
    """

    def detect(
        self,
        os_family: str,
        os_name: str,
        packages: Sequence[Package],
    ) -> OSDetectResult: ...


@runtime_checkable
class LibraryDetector(Protocol):
    """Matches the libraries of one lockfile against an advisory feed."""

    def detect(
        self,
        file_path: str,
        libraries: Sequence[Library],
    ) -> list[DetectedVulnerability]: ...
