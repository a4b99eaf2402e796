"""Version ordering and property naming.

Pure string logic with no parsing, no file I/O, and no internal package
imports. All functions are stateless.
"""

import re


def _segment_value(segment: str) -> int:
    """Numeric value of one dot-separated version segment.

    Segments that are not entirely digits (``Final``, ``0-rc1``) count as 0.
    """
    segment = segment.strip()
    if re.fullmatch(r"[0-9]+", segment):
        return int(segment)
    return 0


def compare_versions(v1: str, v2: str) -> int:
    """Compare two version strings segment by segment.

    Missing trailing segments are treated as 0, so ``1.0`` equals ``1.0.0``.
    Qualifiers are not interpreted: ``4.1.130.Final`` beats ``4.1.128.Final``
    on the third segment, but ``1.0.Final`` and ``1.0.SNAPSHOT`` compare equal.

    Args:
        v1: Left-hand version.
        v2: Right-hand version.

    Returns:
        A negative number if ``v1 < v2``, positive if ``v1 > v2``, else 0.
    """
    parts1 = [_segment_value(p) for p in v1.split(".")]
    parts2 = [_segment_value(p) for p in v2.split(".")]
    for i in range(max(len(parts1), len(parts2))):
        p1 = parts1[i] if i < len(parts1) else 0
        p2 = parts2[i] if i < len(parts2) else 0
        if p1 != p2:
            return p1 - p2
    return 0


def find_highest_version(versions: list) -> str:
    """Return the greatest version, keeping the earliest among equals.

    Args:
        versions: Non-empty list of version strings.

    Returns:
        The first version that no later candidate strictly exceeds.

    Raises:
        ValueError: If ``versions`` is empty.
    """
    if not versions:
        raise ValueError("find_highest_version() requires at least one version")
    highest = versions[0]
    for current in versions[1:]:
        if compare_versions(current, highest) > 0:
            highest = current
    return highest


def to_property_name(artifact_id: str) -> str:
    """Derive the Maven property that holds a pinned version.

    Every character outside ``[A-Za-z0-9]`` becomes ``_``:
    ``protobuf-java-util`` → ``protobuf_java_util.version``.
    The name depends on the artifactId alone, so ``a.one:core`` and
    ``b.two:core`` (or ``foo.bar`` and ``foo-bar``) share one property.
    """
    return re.sub(r"[^A-Za-z0-9]", "_", artifact_id) + ".version"
