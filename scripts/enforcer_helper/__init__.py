"""Maven Enforcer conflict parsing and dependencyManagement XML generation package."""

from .conflict_models import Conflict, DependencyNode, GeneratedXml, ParseError, ParseSuccess
from .enforcer_parser import parse_enforcer_output, parse_maven_output
from .versions import compare_versions, find_highest_version
from .xml_generator import generate_xml

__all__ = [
    "parse_enforcer_output", "parse_maven_output", "generate_xml",
    "compare_versions", "find_highest_version",
    "Conflict", "DependencyNode", "GeneratedXml", "ParseError", "ParseSuccess",
]
