"""Tests for LibraryDetector and the lockfile registry."""

from __future__ import annotations

import pytest

from layerscan.detector.library import registry
from layerscan.detector.library import (
    LOCKFILE_REGISTRY,
    LibraryDetector,
    LibraryDriver,
    ecosystem_for,
    register_lockfile,
)
from layerscan.exceptions import DetectorError, UnsupportedLibraryTypeError
from layerscan.scanner.interfaces import LibraryDetector as LibraryDetectorInterface
from layerscan.scanner.models import DetectedVulnerability, Library


class _AdvisoryDriver:
    """Looks findings up by (name, version) in a dict."""

    def __init__(self, advisories=None):
        self.advisories = advisories or {}
        self.calls = []

    def detect(self, pkg_name, version):
        self.calls.append((pkg_name, version))
        return list(self.advisories.get((pkg_name, version), []))


RAILS = Library(name="rails", version="6.0")
RACK = Library(name="rack", version="2.0.1")


# ── Registry ─────────────────────────────────────────────────────────────


class TestLockfileRegistry:
    def test_builtin_lockfiles_registered(self):
        expected = {
            "Gemfile.lock": "bundler",
            "composer.lock": "composer",
            "package-lock.json": "npm",
            "yarn.lock": "npm",
            "Cargo.lock": "cargo",
            "Pipfile.lock": "pip",
            "poetry.lock": "pip",
        }
        assert expected.items() <= LOCKFILE_REGISTRY.items()

    def test_ecosystem_for_uses_basename(self):
        assert ecosystem_for("/app/Gemfile.lock") == "bundler"
        assert ecosystem_for("srv/web/package-lock.json") == "npm"
        assert ecosystem_for("Cargo.lock") == "cargo"

    def test_ecosystem_for_unknown(self):
        assert ecosystem_for("/app/requirements.txt") is None
        assert ecosystem_for("/app/Gemfile.lock.bak") is None

    def test_register_lockfile(self, monkeypatch):
        monkeypatch.setitem(LOCKFILE_REGISTRY, "mix.lock", "hex")
        assert ecosystem_for("/app/mix.lock") == "hex"

    def test_register_lockfile_function(self, monkeypatch):
        monkeypatch.setattr(
            "layerscan.detector.library.registry.LOCKFILE_REGISTRY",
            dict(LOCKFILE_REGISTRY),
        )
        register_lockfile("pubspec.lock", "pub")
        assert ecosystem_for("pubspec.lock") == "pub"

    def test_no_loop_names_leak_into_module(self):
        assert not hasattr(registry, "_name")
        assert not hasattr(registry, "_ecosystem")

    def test_fixture_lockfiles_resolve(self, gemfile_app, composer_app):
        assert ecosystem_for(gemfile_app.file_path) == gemfile_app.type
        assert ecosystem_for(composer_app.file_path) == composer_app.type


# ── LibraryDetector ──────────────────────────────────────────────────────


class TestLibraryDetector:
    def test_satisfies_scanner_interface(self):
        assert isinstance(LibraryDetector(), LibraryDetectorInterface)

    def test_driver_satisfies_protocol(self):
        assert isinstance(_AdvisoryDriver(), LibraryDriver)

    def test_detect_calls_driver_per_library_in_order(self):
        vuln = DetectedVulnerability(
            vulnerability_id="CVE-2020-10000",
            pkg_name="rails",
            installed_version="6.0",
            fixed_version="6.1",
        )
        driver = _AdvisoryDriver({("rails", "6.0"): [vuln]})
        detector = LibraryDetector({"bundler": driver})

        vulns = detector.detect("/app/Gemfile.lock", [RAILS, RACK])

        assert vulns == [vuln]
        assert driver.calls == [("rails", "6.0"), ("rack", "2.0.1")]

    def test_fills_blank_package_fields(self):
        driver = _AdvisoryDriver(
            {("rack", "2.0.1"): [DetectedVulnerability(vulnerability_id="CVE-2019-16782", fixed_version="2.0.8")]}
        )
        detector = LibraryDetector({"bundler": driver})

        [vuln] = detector.detect("/app/Gemfile.lock", [RACK])

        assert vuln.pkg_name == "rack"
        assert vuln.installed_version == "2.0.1"
        assert vuln.fixed_version == "2.0.8"

    def test_keeps_driver_package_fields(self):
        original = DetectedVulnerability(
            vulnerability_id="GHSA-xxxx",
            pkg_name="actionpack",
            installed_version="6.0.0",
        )
        detector = LibraryDetector({"bundler": _AdvisoryDriver({("rails", "6.0"): [original]})})

        [vuln] = detector.detect("/app/Gemfile.lock", [RAILS])

        assert vuln is original

    def test_no_findings(self):
        detector = LibraryDetector({"bundler": _AdvisoryDriver()})
        assert detector.detect("/app/Gemfile.lock", [RAILS]) == []

    def test_unknown_lockfile_raises(self):
        detector = LibraryDetector({"bundler": _AdvisoryDriver()})
        with pytest.raises(UnsupportedLibraryTypeError, match="unsupported lockfile") as exc_info:
            detector.detect("/app/requirements.txt", [RAILS])
        assert exc_info.value.file_path == "/app/requirements.txt"
        assert exc_info.value.ecosystem is None

    def test_missing_driver_raises(self):
        detector = LibraryDetector({"bundler": _AdvisoryDriver()})
        with pytest.raises(UnsupportedLibraryTypeError, match="composer") as exc_info:
            detector.detect("/app/composer.lock", [])
        assert exc_info.value.ecosystem == "composer"
        assert isinstance(exc_info.value, DetectorError)

    def test_register_driver(self):
        detector = LibraryDetector()
        detector.register("npm", _AdvisoryDriver())
        assert detector.detect("/srv/package-lock.json", []) == []
