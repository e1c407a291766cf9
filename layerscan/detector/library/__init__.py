"""Application library detection with per-ecosystem drivers keyed by lockfile."""

from layerscan.detector.library.detector import LibraryDetector, LibraryDriver
from layerscan.detector.library.registry import (
    LOCKFILE_REGISTRY,
    ecosystem_for,
    register_lockfile,
)

__all__ = [
    "LOCKFILE_REGISTRY",
    "LibraryDetector",
    "LibraryDriver",
    "ecosystem_for",
    "register_lockfile",
]
