"""layerscan: vulnerability scanning orchestrator for layered artifacts."""

__version__ = "0.1.0"

from layerscan.detector import LibraryDetector, OspkgDetector
from layerscan.exceptions import (
    DetectorError,
    LayerResolutionError,
    LayerscanError,
    LibraryDetectionError,
    OSPackageDetectionError,
    ScanError,
    UnsupportedLibraryTypeError,
)
from layerscan.scanner import (
    OS,
    Application,
    ArtifactDetail,
    DetectedVulnerability,
    Library,
    LocalScanner,
    OSDetectResult,
    Package,
    Result,
    ScanOptions,
    ScanOutcome,
    ScanOutput,
    ScanRequest,
    ScanRunner,
)

__all__ = [
    "OS",
    "Application",
    "ArtifactDetail",
    "DetectedVulnerability",
    "DetectorError",
    "LayerResolutionError",
    "LayerscanError",
    "Library",
    "LibraryDetectionError",
    "LibraryDetector",
    "LocalScanner",
    "OSDetectResult",
    "OSPackageDetectionError",
    "OspkgDetector",
    "Package",
    "Result",
    "ScanError",
    "ScanOptions",
    "ScanOutcome",
    "ScanOutput",
    "ScanRequest",
    "ScanRunner",
    "UnsupportedLibraryTypeError",
]
