"""Lockfile registry — map lockfile names to library ecosystems."""

from __future__ import annotations

from pathlib import PurePosixPath

_BUILTIN_LOCKFILES: dict[str, str] = {
    "Gemfile.lock": "bundler",
    "composer.lock": "composer",
    "package-lock.json": "npm",
    "yarn.lock": "npm",
    "Cargo.lock": "cargo",
    "Pipfile.lock": "pip",
    "poetry.lock": "pip",
    "go.sum": "gomod",
    "packages.lock.json": "nuget",
}

LOCKFILE_REGISTRY: dict[str, str] = {}
LOCKFILE_REGISTRY.update(_BUILTIN_LOCKFILES)


def register_lockfile(file_name: str, ecosystem: str) -> None:
    """Register a lockfile basename (e.g. ``Gemfile.lock``) for *ecosystem*."""
    LOCKFILE_REGISTRY[file_name] = ecosystem


def ecosystem_for(file_path: str) -> str | None:
    """Return the ecosystem of the lockfile at *file_path*, or None if unknown."""
    return LOCKFILE_REGISTRY.get(PurePosixPath(file_path).name)
