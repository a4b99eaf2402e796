"""Enforcer conflict data model classes.

Pure data structures representing parsed maven-enforcer-plugin output.
No behavior or imports from other enforcer_helper modules.
"""

from dataclasses import dataclass, field
from typing import Optional

# Failure tags returned by the parser.
EMPTY_INPUT = "EmptyInput"
NO_ERROR_MARKERS = "NoErrorMarkers"
NO_PARSABLE_PATHS = "NoParsablePaths"
NO_CONFLICTS_FOUND = "NoConflictsFound"


@dataclass(frozen=True)
class DependencyNode:
    """One coordinate in a dependency path.

    Attributes:
        group_id: Maven groupId (e.g. ``com.google.protobuf``).
        artifact_id: Maven artifactId (e.g. ``protobuf-java``).
        version: Version string as printed by the enforcer.
        scope: Maven scope, or ``None`` when the line carried none.
    """
    group_id: str
    artifact_id: str
    version: str
    scope: Optional[str] = None

    @property
    def key(self) -> str:
        """The ``groupId:artifactId`` pair that conflicts are grouped by."""
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def coordinate(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass
class Conflict:
    """One artifact that appears with more than one version.

    Attributes:
        target: The coordinate to pin, carrying the selected version.
        paths: Every dependency chain that led to the artifact, root first.
        versions: Distinct version strings in the order they were seen.
        highest_version: Greatest member of ``versions``.
    """
    target: DependencyNode
    paths: list = field(default_factory=list)
    versions: list = field(default_factory=list)
    highest_version: str = ""


@dataclass
class GeneratedXml:
    """The two XML fragments produced for a list of conflicts."""
    properties: str = ""
    dependency_management: str = ""


@dataclass
class ParseSuccess:
    conflicts: list = field(default_factory=list)
    type: str = field(default="success", init=False)

    @property
    def ok(self) -> bool:
        return True


@dataclass
class ParseError:
    """A parse that produced nothing usable.

    Attributes:
        kind: One of ``EMPTY_INPUT``, ``NO_ERROR_MARKERS``, ``NO_PARSABLE_PATHS``
            or ``NO_CONFLICTS_FOUND``.
        message: Human-readable explanation for the user.
    """
    kind: str
    message: str
    type: str = field(default="error", init=False)

    @property
    def ok(self) -> bool:
        return False
