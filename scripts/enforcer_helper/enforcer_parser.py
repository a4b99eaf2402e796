"""maven-enforcer-plugin output parsing.

Turns the console output of the ``dependencyConvergence`` and
``requireUpperBoundDeps`` rules into Conflict records: splits the ``[ERROR]``
lines into per-path sections, parses each line as a dependency coordinate,
and groups the resulting paths by the artifact at their end.
"""

import logging
import re
from dataclasses import replace
from typing import Optional

from .conflict_models import (
    EMPTY_INPUT,
    NO_CONFLICTS_FOUND,
    NO_ERROR_MARKERS,
    NO_PARSABLE_PATHS,
    Conflict,
    DependencyNode,
    ParseError,
    ParseSuccess,
)
from .versions import find_highest_version

logger = logging.getLogger(__name__)

ERROR_MARKER = "[ERROR]"
SEPARATOR = "and"
SECTION_HEADERS = (
    "Dependency convergence error",
    "Require upper bound dependencies error",
)

MAVEN_SCOPES = {"compile", "provided", "runtime", "test", "system", "import"}

# Characters of the dependency tree drawing ("+-", "|  ", "\-").
TREE_PREFIX = "| +-\\"

# groupId:artifactId[:type[:classifier]]:version[:scope]
_COORD = r"[\w.-]+(?::[\w.-]+){2,5}"

UPPER_BOUND_LINE = re.compile(
    rf"^(?P<coord>{_COORD})(?:\s+\(managed\))?\s+<--\s+(?P<required>{_COORD})"
)
STANDARD_LINE = re.compile(
    rf"^(?P<coord>{_COORD})(?:\s+\[(?P<scope>\w+)\])?(?=\s|$)"
)


def _split_coordinate(coord: str) -> DependencyNode:
    """Split a colon-joined coordinate into a DependencyNode.

    The first two tokens are groupId and artifactId and the last is the
    version. A trailing Maven scope is peeled off first when more than three
    tokens are present; type and classifier tokens in between are dropped.

    Args:
        coord: Coordinate text such as ``io.netty:netty-transport-native-epoll:jar:linux-x86_64:4.1.130.Final:compile``.

    Returns:
        A DependencyNode with the scope set if one was present.
    """
    tokens = coord.split(":")
    scope = None
    if len(tokens) > 3 and tokens[-1] in MAVEN_SCOPES:
        scope = tokens.pop()
    return DependencyNode(
        group_id=tokens[0],
        artifact_id=tokens[1],
        version=tokens[-1],
        scope=scope,
    )


def parse_line(line: str) -> Optional[tuple]:
    """Parse one cleaned ``[ERROR]`` line as a dependency coordinate.

    The upper-bound form (``g:a:1.0 (managed) <-- g:a:1.2``) is tried before
    the plain tree form (``+-g:a:jar:1.0:compile``).

    Args:
        line: A line with the ``[ERROR]`` marker already removed.

    Returns:
        ``(DependencyNode, required_version)`` where ``required_version`` is
        ``None`` outside the upper-bound form, or ``None`` if the line is not
        a coordinate at all.
    """
    content = line.strip().lstrip(TREE_PREFIX)

    match = UPPER_BOUND_LINE.match(content)
    if match:
        node = _split_coordinate(match.group("coord"))
        required = _split_coordinate(match.group("required")).version
        return node, required

    match = STANDARD_LINE.match(content)
    if match:
        node = _split_coordinate(match.group("coord"))
        if match.group("scope"):
            node = replace(node, scope=match.group("scope"))
        return node, None

    return None


def _is_section_boundary(line: str) -> bool:
    return line == SEPARATOR or line.startswith(SECTION_HEADERS)


def split_sections(lines: list) -> list:
    """Group cleaned lines into one section per dependency path.

    ``and`` separators and conflict header lines close the current section
    and are themselves discarded, as are empty lines and stray ``]`` lines.

    Args:
        lines: Lines with the ``[ERROR]`` marker removed and whitespace stripped.

    Returns:
        List of non-empty sections, each a list of lines in input order.
    """
    sections = []
    current = []
    for line in lines:
        if _is_section_boundary(line):
            if current:
                sections.append(current)
                current = []
        elif line and line != "]":
            current.append(line)
    if current:
        sections.append(current)
    return sections


def extract_path(section: list) -> list:
    """Parse every line of a section, keeping the ones that are coordinates.

    Returns:
        List of ``(DependencyNode, required_version)`` tuples, root first.
    """
    path = []
    for line in section:
        parsed = parse_line(line)
        if parsed is not None:
            path.append(parsed)
    return path


def _path_versions(version: str, required: Optional[str]) -> list:
    if required and required != version:
        return [version, required]
    return [version]


def _new_conflict(path: list) -> Conflict:
    """Create the Conflict for the first path that ends at an artifact.

    An upper-bound line pins the target to its required version even when the
    managed version is higher; ``highest_version`` is still the maximum of
    both. Later paths move the pin to the highest version (see ``_merge_path``).
    """
    target, required = path[-1]
    versions = _path_versions(target.version, required)
    return Conflict(
        target=replace(target, version=required or target.version),
        paths=[[node for node, _ in path]],
        versions=versions,
        highest_version=find_highest_version(versions),
    )


def _merge_path(conflict: Conflict, path: list) -> Conflict:
    """Return a copy of ``conflict`` with another path to the same artifact added.

    New versions are appended in the order seen and the selected version is
    moved to the highest one.
    """
    target, required = path[-1]
    versions = list(conflict.versions)
    for version in _path_versions(target.version, required):
        if version not in versions:
            versions.append(version)
    highest = find_highest_version(versions)
    if highest != conflict.highest_version:
        logger.debug("%s: %s supersedes %s", conflict.target.key, highest, conflict.highest_version)
    return Conflict(
        target=replace(conflict.target, version=highest),
        paths=conflict.paths + [[node for node, _ in path]],
        versions=versions,
        highest_version=highest,
    )


def parse_enforcer_output(text: str):
    """Parse maven-enforcer-plugin console output into conflicts.

    Handles both the dependency convergence report (``+-`` tree paths joined
    by ``and``) and the require-upper-bound-deps report (``(managed) <--``
    arrows). Lines that are not coordinates are skipped rather than treated
    as errors, so noisy console output still yields what can be recovered.

    Args:
        text: Raw console output, typically pasted from a failed build.

    Returns:
        ``ParseSuccess`` with one Conflict per ``groupId:artifactId`` in
        first-seen order, or ``ParseError`` describing why nothing was found.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return ParseError(EMPTY_INPUT, "Empty input")

    error_lines = [line for line in lines if ERROR_MARKER in line]
    if not error_lines:
        return ParseError(
            NO_ERROR_MARKERS,
            "No [ERROR] lines found. Please paste maven enforcer output.",
        )

    cleaned = [line.replace(ERROR_MARKER, "", 1).strip() for line in error_lines]
    sections = split_sections(cleaned)
    if not sections:
        return ParseError(NO_PARSABLE_PATHS, "Could not parse dependency paths")

    conflicts = {}
    for section in sections:
        path = extract_path(section)
        if not path:
            logger.debug("Skipping section without coordinates: %r", section[0])
            continue
        key = path[-1][0].key
        if key in conflicts:
            conflicts[key] = _merge_path(conflicts[key], path)
        else:
            conflicts[key] = _new_conflict(path)

    if not conflicts:
        return ParseError(NO_CONFLICTS_FOUND, "No conflicts found in the input")

    logger.debug("Parsed %d conflict(s) from %d section(s)", len(conflicts), len(sections))
    return ParseSuccess(conflicts=list(conflicts.values()))


parse_maven_output = parse_enforcer_output
