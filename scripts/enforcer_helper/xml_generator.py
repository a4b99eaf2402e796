"""Maven XML fragment generators.

Produces the ``<properties>`` entries and ``<dependencyManagement>``
dependencies that pin each conflicting artifact. All functions take parsed
conflicts as input and return strings; no container tags are emitted so the
fragments can be spliced into an existing pom.xml.
"""

from .conflict_models import Conflict, GeneratedXml
from .versions import to_property_name

PROPERTIES_HEADER = "<!-- Versions pinned to resolve maven-enforcer conflicts -->"
INDENT = "    "

# Replacement order matters: "&" first so the other entities are not re-escaped.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters in a text node."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def build_properties_fragment(conflicts: list[Conflict]) -> str:
    """Build the property declarations holding each pinned version.

    Conflicts whose artifactIds map to the same property name each get a
    declaration; Maven keeps the last one for both artifacts.

    Args:
        conflicts: Parsed conflicts, in the order they should be listed.

    Returns:
        A header comment followed by one ``<name>version</name>`` line per
        conflict, or ``""`` when there are no conflicts.
    """
    if not conflicts:
        return ""
    lines = [INDENT + PROPERTIES_HEADER]
    for conflict in conflicts:
        name = to_property_name(conflict.target.artifact_id)
        lines.append(f"{INDENT}<{name}>{escape_xml(conflict.highest_version)}</{name}>")
    return "\n".join(lines)


def build_dependency_management_fragment(conflicts: list[Conflict]) -> str:
    """Build one ``<dependency>`` block per conflict.

    The ``<version>`` element references the property from
    :func:`build_properties_fragment` instead of repeating the literal
    version, so the pin lives in one place.

    Args:
        conflicts: Parsed conflicts, in the order they should be listed.

    Returns:
        The dependency blocks joined by newlines, or ``""`` when empty.
    """
    blocks = []
    for conflict in conflicts:
        target = conflict.target
        name = to_property_name(target.artifact_id)
        blocks.append("\n".join([
            "<dependency>",
            f"{INDENT}<groupId>{escape_xml(target.group_id)}</groupId>",
            f"{INDENT}<artifactId>{escape_xml(target.artifact_id)}</artifactId>",
            f"{INDENT}<version>${{{name}}}</version>",
            "</dependency>",
        ]))
    return "\n".join(blocks)


def generate_xml(conflicts: list[Conflict]) -> GeneratedXml:
    """Render both XML fragments for a list of conflicts."""
    return GeneratedXml(
        properties=build_properties_fragment(conflicts),
        dependency_management=build_dependency_management_fragment(conflicts),
    )
