"""Pydantic response models returned by the tool server."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CoordinatesResponse(BaseModel):
    """Every field of a coordinates string plus its derived names."""

    model_config = ConfigDict(extra="ignore")

    coordinates: str
    group: str
    artifact: str
    version: str
    version_label: Optional[str] = None
    packaging: str
    classifier: Optional[str] = None
    # Derived
    full_version: str
    file_basename: str
    file_name: str
    path: str


class ArtifactUrlResponse(BaseModel):
    """Resolved download URL of an artifact in a repository."""

    model_config = ConfigDict(extra="ignore")

    coordinates: str
    repository_url: str
    url: str


__all__ = ["ArtifactUrlResponse", "CoordinatesResponse"]
