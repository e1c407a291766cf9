"""Test doubles for layerscan, for use in unit and integration tests.

Usage::

    from layerscan.testing import FakeApplier, FakeLibraryDetector, FakeOspkgDetector

    applier = FakeApplier(ArtifactDetail(os=OS("alpine", "3.11")))
    ospkg = FakeOspkgDetector(OSDetectResult.unsupported())
    libs = FakeLibraryDetector({"/app/Gemfile.lock": [vuln]})
    scanner = LocalScanner(applier, ospkg, libs)

Every fake records the arguments it was called with in ``calls``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from layerscan.scanner.models import (
    ArtifactDetail,
    DetectedVulnerability,
    Library,
    OSDetectResult,
    Package,
)


class FakeApplier:
    """Returns a fixed inventory, or raises *error* if given."""

    def __init__(
        self,
        detail: ArtifactDetail | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self._detail = detail if detail is not None else ArtifactDetail()
        self._error = error
        self.calls: list[list[str]] = []

    def apply_layers(self, layer_ids: Sequence[str]) -> ArtifactDetail:
        self.calls.append(list(layer_ids))
        if self._error is not None:
            raise self._error
        return self._detail


class FakeOspkgDetector:
    """Returns a fixed :class:`OSDetectResult`, or raises *error* if given.

    Parameters
    ----------
    result:
        Returned by every ``detect`` call. Defaults to a supported OS with
        no findings.
    error:
        Raised by every ``detect`` call instead of returning.
    """

    def __init__(
        self,
        result: OSDetectResult | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self._result = result if result is not None else OSDetectResult()
        self._error = error
        self.calls: list[tuple[str, str, list[Package]]] = []

    def detect(
        self,
        os_family: str,
        os_name: str,
        packages: Sequence[Package],
    ) -> OSDetectResult:
        self.calls.append((os_family, os_name, list(packages)))
        if self._error is not None:
            raise self._error
        return self._result


class FakeLibraryDetector:
    """Returns findings per file path; unknown paths yield no findings.

    *errors* maps file paths to the exception raised for them.
    """

    def __init__(
        self,
        results: Mapping[str, list[DetectedVulnerability]] | None = None,
        *,
        errors: Mapping[str, Exception] | None = None,
    ) -> None:
        self._results = dict(results or {})
        self._errors = dict(errors or {})
        self.calls: list[tuple[str, list[Library]]] = []

    def detect(
        self,
        file_path: str,
        libraries: Sequence[Library],
    ) -> list[DetectedVulnerability]:
        self.calls.append((file_path, list(libraries)))
        if file_path in self._errors:
            raise self._errors[file_path]
        return list(self._results.get(file_path, []))
