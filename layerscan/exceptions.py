"""Custom exceptions for layerscan."""

from __future__ import annotations


class LayerscanError(Exception):
    """Base exception for all layerscan errors."""


class ScanError(LayerscanError):
    """A scan stage failed. The scan is aborted with no partial results."""

    stage = "failed to scan"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"{self.stage}: {cause}")


class LayerResolutionError(ScanError):
    """Raised when the applier cannot produce an artifact inventory."""

    stage = "failed to apply layers"


class OSPackageDetectionError(ScanError):
    """Raised when OS package detection fails for a reason other than an unsupported OS."""

    stage = "failed to scan OS packages"


class LibraryDetectionError(ScanError):
    """Raised when library detection fails for one application file."""

    stage = "failed to scan application libraries"

    def __init__(self, file_path: str, cause: BaseException):
        self.file_path = file_path
        self.cause = cause
        LayerscanError.__init__(self, f"{self.stage}: {file_path}: {cause}")


class DetectorError(LayerscanError):
    """Raised by the bundled detector adapters."""


class UnsupportedLibraryTypeError(DetectorError):
    """Raised when no library driver handles a lockfile."""

    def __init__(self, file_path: str, ecosystem: str | None = None):
        self.file_path = file_path
        self.ecosystem = ecosystem
        if ecosystem is None:
            msg = f"unsupported lockfile: {file_path}"
        else:
            msg = f"no driver for ecosystem '{ecosystem}': {file_path}"
        super().__init__(msg)
