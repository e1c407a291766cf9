"""Detector adapters for the scanner's OS and library detection interfaces."""

from layerscan.detector.library import LibraryDetector, LibraryDriver
from layerscan.detector.ospkg import OSDriver, OspkgDetector

__all__ = [
    "LibraryDetector",
    "LibraryDriver",
    "OSDriver",
    "OspkgDetector",
]
