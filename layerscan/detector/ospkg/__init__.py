"""OS package detection with per-family drivers and end-of-life tracking."""

from layerscan.detector.ospkg.detector import OSDriver, OspkgDetector
from layerscan.detector.ospkg.eol import EOL_DATES, EOLDriver, is_supported_version, release_of

__all__ = [
    "EOL_DATES",
    "EOLDriver",
    "OSDriver",
    "OspkgDetector",
    "is_supported_version",
    "release_of",
]
