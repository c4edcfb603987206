"""Maven coordinates value type.

A `CoordinateSet` holds the six logical parts of a Maven coordinates string,
``groupId:artifactId:version[:packaging[:classifier]]``, and derives the file
name, repository path and resolved URL of the artifact on demand.

Notes:
- Derived strings are never cached; each call recomputes from current fields,
  so assigning to a field is visible immediately.
- ``None`` and ``""`` are distinct for `version_label` and `classifier`:
  ``"g:a:1.0-"`` has an empty label, ``"g:a:1.0"`` has none.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .config import Settings
from .exceptions import InvalidCoordinatesError

_logger = logging.getLogger(__name__)

COORDINATES_SEPARATOR: Final[str] = ":"
DEFAULT_PACKAGING: Final[str] = "jar"
# Separates artifact, version, label and classifier in file names
FILENAME_SEPARATOR: Final[str] = "-"
EXTENSION_SEPARATOR: Final[str] = "."
DEFAULT_PATH_SEPARATOR: Final[str] = "/"

_MANDATORY_PARTS = 3


def split_version(version: str) -> Tuple[str, Optional[str]]:
    """Split a version token at its last hyphen into (version, label).

    >>> split_version("1.0.0-SNAPSHOT")
    ('1.0.0', 'SNAPSHOT')
    >>> split_version("1.0.0")
    ('1.0.0', None)
    """
    version, sep, label = version.rpartition(FILENAME_SEPARATOR)
    if not sep:
        return label, None
    return version, label


class CoordinateSet(BaseModel):
    """Maven coordinates (group, artifact, version, label, packaging, classifier).

    Fields are plain mutable attributes and are not re-validated on
    assignment. Build from a string with :meth:`parse`.
    """

    model_config = ConfigDict(extra="forbid")

    group: str
    artifact: str
    version: str
    version_label: Optional[str] = None
    packaging: str = DEFAULT_PACKAGING
    classifier: Optional[str] = None

    @classmethod
    def parse(cls, raw: Any) -> CoordinateSet:
        """Parse ``groupId:artifactId:version[:packaging[:classifier]]``.

        `raw` is converted with ``str()``. Parts beyond the fifth are ignored.
        Packaging falls back to ``jar`` only when the fourth part is missing,
        not when it is empty.

        Raises:
            InvalidCoordinatesError: fewer than three parts are present.
        """
        text = str(raw)
        parts = text.split(COORDINATES_SEPARATOR)
        if len(parts) < _MANDATORY_PARTS:
            _logger.debug(
                "rejected maven coordinates", extra={"op": "parse", "tokens": len(parts)}
            )
            raise InvalidCoordinatesError(text, len(parts))

        tokens = iter(parts)
        group = next(tokens)
        artifact = next(tokens)
        version, version_label = split_version(next(tokens))
        packaging = next(tokens, DEFAULT_PACKAGING)
        classifier = next(tokens, None)

        return cls(
            group=group,
            artifact=artifact,
            version=version,
            version_label=version_label,
            packaging=packaging,
            classifier=classifier,
        )

    def full_version(self) -> str:
        """Return the version including its label, e.g. ``1.0.0-SNAPSHOT``."""
        if self.version_label is None:
            return self.version
        return f"{self.version}{FILENAME_SEPARATOR}{self.version_label}"

    def file_basename(self) -> str:
        """Return the file name without extension, e.g. ``artifact-1.0.0-sources``."""
        basename = f"{self.artifact}{FILENAME_SEPARATOR}{self.full_version()}"
        if self.classifier is not None:
            basename += f"{FILENAME_SEPARATOR}{self.classifier}"
        return basename

    def file_name(self) -> str:
        return f"{self.file_basename()}{EXTENSION_SEPARATOR}{self.packaging}"

    def to_path_with_separator(self, separator: str) -> str:
        """Return the repository-relative path using `separator` between parts.

        Every group segment is followed by the separator, then come the
        artifact directory, the version directory and the file name.
        """
        path = ""
        for directory in self.group.split("."):
            path += directory + separator

        path += self.artifact + separator
        path += self.full_version() + separator
        path += self.file_name()
        return path

    def to_path(self, separator: str = DEFAULT_PATH_SEPARATOR) -> str:
        return self.to_path_with_separator(separator)

    def resolve(self, base_url: Optional[str] = None) -> str:
        """Resolve the artifact URL under `base_url`.

        Defaults to the configured ``MAVEN_REPOSITORY_URL``. This only builds a
        string; nothing is fetched.
        """
        if base_url is None:
            base_url = Settings().MAVEN_REPOSITORY_URL
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url + self.to_path(DEFAULT_PATH_SEPARATOR)

    def to_string(self) -> str:
        """Serialize back to a coordinates string.

        Packaging is emitted when it is not ``jar`` or a classifier is
        present; an explicit ``jar`` without classifier is dropped.
        """
        parts = [self.group, self.artifact, self.full_version()]
        if self.packaging != DEFAULT_PACKAGING or self.classifier is not None:
            parts.append(self.packaging)
            if self.classifier is not None:
                parts.append(self.classifier)
        return COORDINATES_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_string()


__all__ = [
    "CoordinateSet",
    "DEFAULT_PACKAGING",
    "split_version",
]
