"""LocalScanner — apply layers, then run OS and library detection."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from layerscan.exceptions import (
    LayerResolutionError,
    LibraryDetectionError,
    OSPackageDetectionError,
)
from layerscan.scanner.interfaces import Applier, LibraryDetector, OspkgDetector
from layerscan.scanner.models import (
    OS,
    ArtifactDetail,
    Result,
    ScanOptions,
    ScanOutput,
)

log = structlog.get_logger("layerscan.scanner")


class LocalScanner:
    """
    Scan one artifact from its layers.

    Phase 1: Applier.apply_layers()
    Phase 2: OspkgDetector.detect() (when "os" is selected and an OS was found)
    Phase 3: LibraryDetector.detect() per application (when "library" is selected)

    Any failure aborts the scan; the caller gets either a full
    :class:`ScanOutput` or a :class:`~layerscan.exceptions.ScanError`.
    An unsupported OS is not a failure.
    """

    def __init__(
        self,
        applier: Applier,
        ospkg_detector: OspkgDetector,
        library_detector: LibraryDetector,
    ) -> None:
        self._applier = applier
        self._ospkg_detector = ospkg_detector
        self._library_detector = library_detector

    def scan(
        self,
        target: str,
        secondary_target: str,
        layer_ids: Sequence[str],
        options: ScanOptions,
    ) -> ScanOutput:
        """Scan *target* built from *layer_ids*.

        *secondary_target* (e.g. a repo digest) is not interpreted here; it
        only ends up in the log context.
        """
        scan_log = log.bind(target=target, secondary_target=secondary_target)
        if options.unknown_types:
            scan_log.debug("scan.unknown_vuln_types", vuln_types=sorted(options.unknown_types))
        scan_log.info("scan.started", layers=len(layer_ids))

        try:
            detail = self._applier.apply_layers(layer_ids)
        except Exception as exc:
            raise LayerResolutionError(exc) from exc
        scan_log.debug(
            "scan.layers_applied",
            os=detail.os,
            packages=len(detail.packages),
            applications=len(detail.applications),
        )

        results: list[Result] = []
        eosl = False

        if options.scan_os and detail.os is not None and not detail.os.is_empty():
            os_result, eosl = self._scan_os(target, detail, scan_log)
            if os_result is not None:
                results.append(os_result)

        if options.scan_library:
            results.extend(self._scan_libraries(detail, scan_log))

        scan_log.info("scan.completed", results=len(results), eosl=eosl)
        return ScanOutput(results=results, os=detail.os, eosl=eosl)

    def _scan_os(
        self,
        target: str,
        detail: ArtifactDetail,
        scan_log: structlog.stdlib.BoundLogger,
    ) -> tuple[Result | None, bool]:
        os_info: OS = detail.os  # type: ignore[assignment]
        try:
            detected = self._ospkg_detector.detect(os_info.family, os_info.name, detail.packages)
        except Exception as exc:
            raise OSPackageDetectionError(exc) from exc

        if not detected.supported:
            scan_log.info("scan.os_unsupported", family=os_info.family, name=os_info.name)
            return None, False

        scan_log.debug(
            "scan.os_detected",
            family=os_info.family,
            name=os_info.name,
            vulnerabilities=len(detected.vulnerabilities),
            eosl=detected.eosl,
        )
        result = Result(
            target=f"{target} ({os_info.family} {os_info.name})",
            vulnerabilities=list(detected.vulnerabilities),
        )
        return result, detected.eosl

    def _scan_libraries(
        self,
        detail: ArtifactDetail,
        scan_log: structlog.stdlib.BoundLogger,
    ) -> list[Result]:
        results: list[Result] = []
        for app in detail.applications:
            try:
                vulns = self._library_detector.detect(app.file_path, app.libraries)
            except Exception as exc:
                raise LibraryDetectionError(app.file_path, exc) from exc

            scan_log.debug(
                "scan.libraries_detected",
                file_path=app.file_path,
                app_type=app.type,
                libraries=len(app.libraries),
                vulnerabilities=len(vulns),
            )
            if not vulns:
                continue
            results.append(Result(target=app.file_path, vulnerabilities=list(vulns)))
        return results
