import pytest

from maven_coordinates import CoordinateSet, InvalidCoordinatesError
from maven_coordinates.server import describe_coordinates_core, resolve_artifact_url_core

SOURCES = "io.github.brawaru:artifact:1.0.0-SNAPSHOT:jar:sources"


def test_describe_reports_fields_and_derived_names():
    resp = describe_coordinates_core(SOURCES)

    assert resp.coordinates == SOURCES
    assert resp.group == "io.github.brawaru"
    assert resp.artifact == "artifact"
    assert resp.version == "1.0.0"
    assert resp.version_label == "SNAPSHOT"
    assert resp.packaging == "jar"
    assert resp.classifier == "sources"
    assert resp.full_version == "1.0.0-SNAPSHOT"
    assert resp.file_basename == "artifact-1.0.0-SNAPSHOT-sources"
    assert resp.file_name == "artifact-1.0.0-SNAPSHOT-sources.jar"
    assert resp.path == (
        "io/github/brawaru/artifact/1.0.0-SNAPSHOT/artifact-1.0.0-SNAPSHOT-sources.jar"
    )


def test_describe_custom_separator():
    resp = describe_coordinates_core("junit:junit:4.13.2", separator="\\")
    assert resp.path == "junit\\junit\\4.13.2\\junit-4.13.2.jar"
    assert resp.version_label is None
    assert resp.classifier is None


def test_describe_canonicalizes_explicit_jar():
    assert describe_coordinates_core("g:a:1.0:jar").coordinates == "g:a:1.0"


def test_describe_model_dump_is_plain_dict():
    data = describe_coordinates_core("g:a:1.0").model_dump()
    assert data["file_name"] == "a-1.0.jar"
    assert data["classifier"] is None


@pytest.mark.parametrize("raw", ["", "g:a"])
def test_invalid_coordinates_surface_as_value_error(raw: str):
    with pytest.raises(ValueError):
        describe_coordinates_core(raw)
    with pytest.raises(InvalidCoordinatesError):
        resolve_artifact_url_core(raw)


def test_resolve_with_explicit_repository():
    resp = resolve_artifact_url_core("org.example:lib:2.0:pom", "https://maven.example.invalid/")
    assert resp.repository_url == "https://maven.example.invalid/"
    assert resp.url == "https://maven.example.invalid/org/example/lib/2.0/lib-2.0.pom"
    assert resp.coordinates == "org.example:lib:2.0:pom"


def test_resolve_defaults_to_settings(monkeypatch: pytest.MonkeyPatch):
    resp = resolve_artifact_url_core("org.example:lib:2.0")
    assert resp.repository_url == "https://repo1.maven.org/maven2"
    assert resp.url == "https://repo1.maven.org/maven2/org/example/lib/2.0/lib-2.0.jar"

    monkeypatch.setenv("MAVEN_REPOSITORY_URL", "https://mirror.example.invalid/maven2")
    resp = resolve_artifact_url_core("org.example:lib:2.0")
    assert resp.url == "https://mirror.example.invalid/maven2/org/example/lib/2.0/lib-2.0.jar"


def test_resolve_empty_repository_matches_core():
    resp = resolve_artifact_url_core("g:a:1.0", "")
    assert resp.repository_url == ""
    assert resp.url == CoordinateSet.parse("g:a:1.0").resolve("")
    assert resp.url == "/g/a/1.0/a-1.0.jar"
