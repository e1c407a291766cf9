"""Turn a set of layers into a per-target vulnerability report."""

from layerscan.scanner.interfaces import Applier, LibraryDetector, OspkgDetector
from layerscan.scanner.local import LocalScanner
from layerscan.scanner.models import (
    OS,
    Application,
    ArtifactDetail,
    DetectedVulnerability,
    Library,
    OSDetectResult,
    Package,
    Result,
    ScanOptions,
    ScanOutput,
)
from layerscan.scanner.runner import ScanOutcome, ScanRequest, ScanRunner

__all__ = [
    "OS",
    "Application",
    "Applier",
    "ArtifactDetail",
    "DetectedVulnerability",
    "Library",
    "LibraryDetector",
    "LocalScanner",
    "OSDetectResult",
    "OspkgDetector",
    "Package",
    "Result",
    "ScanOptions",
    "ScanOutcome",
    "ScanOutput",
    "ScanRequest",
    "ScanRunner",
]
