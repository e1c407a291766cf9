"""OspkgDetector — route OS package detection to a per-family driver."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

import structlog

from layerscan.scanner.models import DetectedVulnerability, OSDetectResult, Package

log = structlog.get_logger("layerscan.detector")


@runtime_checkable
class OSDriver(Protocol):
    """Matching logic for one OS family."""

    def detect(
        self,
        os_version: str,
        packages: Sequence[Package],
    ) -> list[DetectedVulnerability]: ...

    def is_supported_version(self, os_family: str, os_version: str) -> bool: ...


class OspkgDetector:
    """Detect OS package vulnerabilities with the driver registered for the family.

    A family without a driver yields ``OSDetectResult.unsupported()``.
    Driver exceptions propagate to the caller.
    """

    def __init__(self, drivers: Mapping[str, OSDriver] | None = None) -> None:
        self._drivers: dict[str, OSDriver] = {}
        for family, driver in (drivers or {}).items():
            self.register(family, driver)

    def register(self, os_family: str, driver: OSDriver) -> None:
        """Register *driver* for *os_family* (case-insensitive)."""
        self._drivers[os_family.lower()] = driver

    @property
    def families(self) -> list[str]:
        return sorted(self._drivers)

    def detect(
        self,
        os_family: str,
        os_name: str,
        packages: Sequence[Package],
    ) -> OSDetectResult:
        driver = self._drivers.get(os_family.lower())
        if driver is None:
            log.info("ospkg.unsupported_os", family=os_family, name=os_name)
            return OSDetectResult.unsupported()

        vulns = driver.detect(os_name, packages)
        eosl = not driver.is_supported_version(os_family, os_name)
        if eosl:
            log.warning("ospkg.eosl", family=os_family, name=os_name)
        log.debug(
            "ospkg.detected",
            family=os_family,
            name=os_name,
            packages=len(packages),
            vulnerabilities=len(vulns),
        )
        return OSDetectResult(vulnerabilities=list(vulns), eosl=eosl)
