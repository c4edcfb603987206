"""MCP STDIO server and tool definitions.

Design notes:
- Transport adapter stays thin; core logic is transport-neutral and returns
  pydantic models.
- Invalid coordinates surface as ValueError, which the transport reports as a
  tool error.
- Logging goes to stderr via the central logging config.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from .config import Settings
from .coordinates import CoordinateSet
from .logging_config import configure_logging
from .models import ArtifactUrlResponse, CoordinatesResponse

_logger = logging.getLogger(__name__)

_settings = Settings()
configure_logging(_settings.LOG_LEVEL, json_logs=_settings.LOG_JSON)


def describe_coordinates_core(coordinates: str, separator: str = "/") -> CoordinatesResponse:
    """Parse `coordinates` and report its fields and derived names.

    Raises InvalidCoordinatesError (a ValueError) for fewer than three parts.
    """

    coords = CoordinateSet.parse(coordinates)
    _logger.info("described maven coordinates", extra={"op": "describe", "group": coords.group})
    return CoordinatesResponse(
        coordinates=coords.to_string(),
        group=coords.group,
        artifact=coords.artifact,
        version=coords.version,
        version_label=coords.version_label,
        packaging=coords.packaging,
        classifier=coords.classifier,
        full_version=coords.full_version(),
        file_basename=coords.file_basename(),
        file_name=coords.file_name(),
        path=coords.to_path(separator),
    )


def resolve_artifact_url_core(
    coordinates: str, repository_url: Optional[str] = None
) -> ArtifactUrlResponse:
    """Resolve the artifact URL for `coordinates` under `repository_url`.

    Falls back to the configured MAVEN_REPOSITORY_URL only when no URL is
    given; an empty string is used as-is. Nothing is fetched.
    """

    coords = CoordinateSet.parse(coordinates)
    base_url = repository_url if repository_url is not None else Settings().MAVEN_REPOSITORY_URL
    _logger.info("resolved artifact url", extra={"op": "resolve", "group": coords.group})
    return ArtifactUrlResponse(
        coordinates=coords.to_string(),
        repository_url=base_url,
        url=coords.resolve(base_url),
    )


_server = FastMCP("maven-coordinates")


@_server.tool()
def describe_coordinates(coordinates: str, separator: str = "/") -> dict:
    """Break Maven coordinates into fields, file name and repository path.

    Transport wrapper around describe_coordinates_core.
    """

    return describe_coordinates_core(coordinates, separator=separator).model_dump()


@_server.tool()
def resolve_artifact_url(coordinates: str, repository_url: Optional[str] = None) -> dict:
    """Return the download URL of an artifact in a Maven repository.

    Transport wrapper around resolve_artifact_url_core.
    """

    return resolve_artifact_url_core(coordinates, repository_url=repository_url).model_dump()


def run() -> None:  # pragma: no cover
    _server.run()


__all__ = [
    "describe_coordinates_core",
    "resolve_artifact_url_core",
    "run",
]
