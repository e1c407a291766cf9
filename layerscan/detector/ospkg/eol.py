"""End-of-support-life dates per OS release."""

from __future__ import annotations

from datetime import datetime, timezone

# family -> release -> end of vendor support (UTC)
EOL_DATES: dict[str, dict[str, datetime]] = {
    "alpine": {
        "3.9": datetime(2020, 11, 1, tzinfo=timezone.utc),
        "3.10": datetime(2021, 5, 1, tzinfo=timezone.utc),
        "3.11": datetime(2021, 11, 1, tzinfo=timezone.utc),
        "3.12": datetime(2022, 5, 1, tzinfo=timezone.utc),
        "3.13": datetime(2022, 11, 1, tzinfo=timezone.utc),
        "3.14": datetime(2023, 5, 1, tzinfo=timezone.utc),
        "3.15": datetime(2023, 11, 1, tzinfo=timezone.utc),
        "3.16": datetime(2024, 5, 23, tzinfo=timezone.utc),
        "3.17": datetime(2024, 11, 22, tzinfo=timezone.utc),
        "3.18": datetime(2025, 5, 9, tzinfo=timezone.utc),
        "3.19": datetime(2025, 11, 1, tzinfo=timezone.utc),
        "3.20": datetime(2026, 4, 1, tzinfo=timezone.utc),
    },
    "debian": {
        "8": datetime(2020, 6, 30, tzinfo=timezone.utc),
        "9": datetime(2022, 6, 30, tzinfo=timezone.utc),
        "10": datetime(2024, 6, 30, tzinfo=timezone.utc),
        "11": datetime(2026, 8, 31, tzinfo=timezone.utc),
        "12": datetime(2028, 6, 30, tzinfo=timezone.utc),
    },
    "ubuntu": {
        "16.04": datetime(2021, 4, 30, tzinfo=timezone.utc),
        "18.04": datetime(2023, 5, 31, tzinfo=timezone.utc),
        "20.04": datetime(2025, 5, 31, tzinfo=timezone.utc),
        "22.04": datetime(2027, 6, 1, tzinfo=timezone.utc),
        "24.04": datetime(2029, 6, 1, tzinfo=timezone.utc),
    },
    "centos": {
        "6": datetime(2020, 11, 30, tzinfo=timezone.utc),
        "7": datetime(2024, 6, 30, tzinfo=timezone.utc),
        "8": datetime(2021, 12, 31, tzinfo=timezone.utc),
    },
    "amazon": {
        "1": datetime(2023, 12, 31, tzinfo=timezone.utc),
        "2": datetime(2026, 6, 30, tzinfo=timezone.utc),
        "2023": datetime(2029, 6, 30, tzinfo=timezone.utc),
    },
}

# Number of leading version components that identify a release.
# Families not listed use the full version string.
_RELEASE_COMPONENTS: dict[str, int] = {
    "alpine": 2,
    "debian": 1,
    "centos": 1,
    "amazon": 1,
}


def release_of(os_family: str, os_version: str) -> str:
    """Normalise a full OS version to the release key used in ``EOL_DATES``.

    ``release_of("alpine", "3.11.5") == "3.11"``;
    ``release_of("debian", "10.3") == "10"``.
    """
    family = os_family.lower()
    n = _RELEASE_COMPONENTS.get(family)
    if n is None:
        return os_version
    # Amazon Linux 2 reports e.g. "2 (Karoo)"
    version = os_version.split(" ", 1)[0]
    return ".".join(version.split(".")[:n])


def is_supported_version(os_family: str, os_version: str, now: datetime | None = None) -> bool:
    """
    True unless the release is known and its support window has closed.
    Unknown families and releases count as supported.
    """
    dates = EOL_DATES.get(os_family.lower())
    if dates is None:
        return True
    eol = dates.get(release_of(os_family, os_version))
    if eol is None:
        return True
    if now is None:
        now = datetime.now(timezone.utc)
    return now < eol


class EOLDriver:
    """Mixin giving an OS driver table-based ``is_supported_version``.

    Assign ``clock`` on the instance to a zero-argument callable to pin "now".
    """

    clock = None

    def is_supported_version(self, os_family: str, os_version: str) -> bool:
        now = self.clock() if self.clock is not None else None
        return is_supported_version(os_family, os_version, now=now)
