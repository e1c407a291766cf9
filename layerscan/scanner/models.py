"""Data models for the scanner: artifact inventory, findings, and scan options."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

VULN_TYPE_OS = "os"
VULN_TYPE_LIBRARY = "library"
KNOWN_VULN_TYPES = frozenset({VULN_TYPE_OS, VULN_TYPE_LIBRARY})

_DEFAULT_VULN_TYPE = "os,library"


# ── Inventory (applier output) ───────────────────────────────────────────


@dataclass(frozen=True)
class OS:
    """OS identity of an artifact. Both fields empty means "not detected"."""

    family: str = ""
    name: str = ""

    def is_empty(self) -> bool:
        return self.family == "" and self.name == ""


@dataclass(frozen=True)
class Package:
    """An installed OS package."""

    name: str
    version: str


@dataclass(frozen=True)
class Library:
    """A library pinned by an application lockfile."""

    name: str
    version: str


@dataclass(frozen=True)
class Application:
    """One lockfile found in the artifact, identified by its path."""

    type: str  # "bundler", "composer", "npm", ...
    file_path: str
    libraries: tuple[Library, ...] = ()


@dataclass(frozen=True)
class ArtifactDetail:
    """
    Merged inventory of an artifact after all layers are applied.
    ``packages`` is only meaningful when ``os`` is set.
    """

    os: OS | None = None
    packages: tuple[Package, ...] = ()
    applications: tuple[Application, ...] = ()


# ── Findings ─────────────────────────────────────────────────────────────


class DetectedVulnerability(BaseModel):
    """A vulnerability matched against one package or library.

    Extra fields (severity, title, references, ...) are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    vulnerability_id: str
    pkg_name: str = ""
    installed_version: str = ""
    fixed_version: str = ""


class Result(BaseModel):
    """Findings for one target scope: the OS as a whole, or one lockfile."""

    model_config = ConfigDict(frozen=True)

    target: str
    vulnerabilities: list[DetectedVulnerability] = Field(default_factory=list)


@dataclass(frozen=True)
class OSDetectResult:
    """Outcome of OS package detection.

    Either a successful match (``supported=True``) or the soft
    "unsupported OS" outcome, which carries no findings.
    """

    vulnerabilities: list[DetectedVulnerability] = field(default_factory=list)
    eosl: bool = False
    supported: bool = True

    @classmethod
    def unsupported(cls) -> OSDetectResult:
        return cls(vulnerabilities=[], eosl=False, supported=False)


# ── Options / output ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScanOptions:
    """Selects which detectors run. Unknown vuln types are ignored."""

    vuln_type: frozenset[str] = KNOWN_VULN_TYPES

    def __post_init__(self) -> None:
        # A bare string is one vuln type, not an iterable of characters.
        if isinstance(self.vuln_type, str):
            object.__setattr__(self, "vuln_type", frozenset({self.vuln_type}))
        # Accept any iterable of strings (list, tuple, set).
        elif not isinstance(self.vuln_type, frozenset):
            object.__setattr__(self, "vuln_type", frozenset(self.vuln_type))

    @property
    def scan_os(self) -> bool:
        return VULN_TYPE_OS in self.vuln_type

    @property
    def scan_library(self) -> bool:
        return VULN_TYPE_LIBRARY in self.vuln_type

    @property
    def unknown_types(self) -> frozenset[str]:
        return self.vuln_type - KNOWN_VULN_TYPES

    @classmethod
    def parse(cls, value: str) -> ScanOptions:
        """Build options from a comma-separated selector like ``"os,library"``."""
        types = {part.strip() for part in value.split(",")}
        types.discard("")
        return cls(vuln_type=frozenset(types))

    @classmethod
    def from_env(cls) -> ScanOptions:
        """Read the selector from ``LAYERSCAN_VULN_TYPE`` (default: ``os,library``)."""
        return cls.parse(os.environ.get("LAYERSCAN_VULN_TYPE", _DEFAULT_VULN_TYPE))


@dataclass
class ScanOutput:
    """Scanner return value."""

    results: list[Result]
    os: OS | None
    eosl: bool = False
