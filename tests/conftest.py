"""Shared pytest fixtures for layerscan tests."""

import pytest

from layerscan.scanner.models import (
    OS,
    Application,
    ArtifactDetail,
    DetectedVulnerability,
    Library,
    Package,
)

LAYER_IDS = ["sha256:5216338b40a7b96416b8b9858974bbe4acc3096ee60acbc4dfb1ee02aecceb10"]


@pytest.fixture
def layer_ids():
    return list(LAYER_IDS)


@pytest.fixture
def musl_vuln():
    return DetectedVulnerability(
        vulnerability_id="CVE-2020-9999",
        pkg_name="musl",
        installed_version="1.2.3",
        fixed_version="1.2.4",
    )


@pytest.fixture
def rails_vuln():
    return DetectedVulnerability(
        vulnerability_id="CVE-2020-10000",
        pkg_name="rails",
        installed_version="6.0",
        fixed_version="6.1",
    )


@pytest.fixture
def laravel_vuln():
    return DetectedVulnerability(
        vulnerability_id="CVE-2020-11111",
        pkg_name="laravel/framework",
        installed_version="6.0.0",
        fixed_version="6.18.34",
    )


@pytest.fixture
def gemfile_app():
    return Application(
        type="bundler",
        file_path="/app/Gemfile.lock",
        libraries=(Library(name="rails", version="6.0"),),
    )


@pytest.fixture
def composer_app():
    return Application(
        type="composer",
        file_path="/app/composer.lock",
        libraries=(Library(name="laravel/framework", version="6.0.0"),),
    )


@pytest.fixture
def alpine_detail(gemfile_app):
    """alpine 3.11 with musl installed and one bundler application."""
    return ArtifactDetail(
        os=OS(family="alpine", name="3.11"),
        packages=(Package(name="musl", version="1.2.3"),),
        applications=(gemfile_app,),
    )
