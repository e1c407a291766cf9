"""LibraryDetector — route lockfile libraries to a per-ecosystem driver."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

import structlog

from layerscan.detector.library.registry import ecosystem_for
from layerscan.exceptions import UnsupportedLibraryTypeError
from layerscan.scanner.models import DetectedVulnerability, Library

log = structlog.get_logger("layerscan.detector")


@runtime_checkable
class LibraryDriver(Protocol):
    """Matching logic for one library ecosystem."""

    def detect(self, pkg_name: str, version: str) -> list[DetectedVulnerability]: ...


def _fill_package(vuln: DetectedVulnerability, lib: Library) -> DetectedVulnerability:
    update: dict[str, str] = {}
    if not vuln.pkg_name:
        update["pkg_name"] = lib.name
    if not vuln.installed_version:
        update["installed_version"] = lib.version
    if not update:
        return vuln
    return vuln.model_copy(update=update)


class LibraryDetector:
    """Detect library vulnerabilities in one lockfile.

    The lockfile name selects the ecosystem (see
    :mod:`layerscan.detector.library.registry`); the ecosystem selects the
    driver. Each library is checked in lockfile order.
    """

    def __init__(self, drivers: Mapping[str, LibraryDriver] | None = None) -> None:
        self._drivers: dict[str, LibraryDriver] = dict(drivers or {})

    def register(self, ecosystem: str, driver: LibraryDriver) -> None:
        self._drivers[ecosystem] = driver

    def detect(
        self,
        file_path: str,
        libraries: Sequence[Library],
    ) -> list[DetectedVulnerability]:
        ecosystem = ecosystem_for(file_path)
        if ecosystem is None:
            raise UnsupportedLibraryTypeError(file_path)
        driver = self._drivers.get(ecosystem)
        if driver is None:
            raise UnsupportedLibraryTypeError(file_path, ecosystem)

        vulns: list[DetectedVulnerability] = []
        for lib in libraries:
            for vuln in driver.detect(lib.name, lib.version):
                vulns.append(_fill_package(vuln, lib))

        log.debug(
            "library.detected",
            file_path=file_path,
            ecosystem=ecosystem,
            libraries=len(libraries),
            vulnerabilities=len(vulns),
        )
        return vulns
