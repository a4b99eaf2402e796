"""Plain-text rendering of parsed conflicts for terminal output."""

from .conflict_models import Conflict

PATH_ARROW = " -> "


def format_path(path: list) -> str:
    """Join a dependency path as ``g:a:v -> g:a:v -> ...``, root first."""
    return PATH_ARROW.join(node.coordinate for node in path)


def format_conflict(conflict: Conflict) -> str:
    """Render one conflict: its artifact, the versions seen, and every path.

    Example::

        com.google.protobuf:protobuf-java
          Versions: 4.33.2, 4.33.4 -> Using: 4.33.4
            com.example:app:1.0 -> com.google.protobuf:protobuf-java:4.33.2
    """
    lines = [
        conflict.target.key,
        f"  Versions: {', '.join(conflict.versions)} -> Using: {conflict.highest_version}",
    ]
    for path in conflict.paths:
        lines.append(f"    {format_path(path)}")
    return "\n".join(lines)


def format_conflict_report(conflicts: list[Conflict]) -> str:
    blocks = [f"Found {len(conflicts)} conflict(s)"]
    blocks.extend(format_conflict(c) for c in conflicts)
    return "\n\n".join(blocks)
