from __future__ import annotations

import pytest

from maven_coordinates.coordinates import CoordinateSet

SNAPSHOT = "io.github.brawaru:artifact:1.0.0-SNAPSHOT"
SNAPSHOT_SOURCES = "io.github.brawaru:artifact:1.0.0-SNAPSHOT:jar:sources"


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep developer environment from leaking into Settings()
    for key in ("MAVEN_REPOSITORY_URL", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def snapshot_coords() -> CoordinateSet:
    return CoordinateSet.parse(SNAPSHOT)


@pytest.fixture
def sources_coords() -> CoordinateSet:
    return CoordinateSet.parse(SNAPSHOT_SOURCES)
