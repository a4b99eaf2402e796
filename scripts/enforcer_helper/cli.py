"""CLI entry point.

Reads maven-enforcer-plugin output from stdin, parses it, and prints the
conflict report together with the generated XML fragments.
"""

import argparse
import logging
import sys

from .enforcer_parser import parse_enforcer_output
from .report import format_conflict_report
from .xml_generator import generate_xml

OUTPUT_CHOICES = ["all", "properties", "dependency-management"]


def _banner(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def run(text: str, output: str = "all", show_report: bool = True):
    """Parse enforcer output and build the text to print.

    Args:
        text: Raw maven-enforcer-plugin console output.
        output: ``"all"``, ``"properties"`` or ``"dependency-management"``.
        show_report: Whether to include the conflict listing.

    Returns:
        ``(content, error)``: the text to print on success, or ``None`` and
        the parser's ParseError when nothing could be extracted.
    """
    result = parse_enforcer_output(text)
    if not result.ok:
        return None, result

    xml = generate_xml(result.conflicts)
    lines = []
    if show_report:
        lines.append(format_conflict_report(result.conflicts))
        lines.append("")
    if output in ("all", "properties"):
        lines.extend(_banner("<properties>"))
        lines.append(xml.properties)
        lines.append("")
    if output in ("all", "dependency-management"):
        lines.extend(_banner("<dependencyManagement><dependencies>"))
        lines.append(xml.dependency_management)
        lines.append("")
    return "\n".join(lines), None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate dependencyManagement XML from maven-enforcer-plugin "
                    "convergence or upper-bound errors read from stdin"
    )
    parser.add_argument(
        "--output", "-o", choices=OUTPUT_CHOICES, default="all",
        help="Which XML fragment to print (default: all)",
    )
    parser.add_argument("--no-report", action="store_true", help="Do not list the parsed conflicts")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log parser decisions to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    """CLI entry point. Parses arguments and delegates to ``run()``."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    content, error = run(sys.stdin.read(), args.output, not args.no_report)
    if error is not None:
        print(f"ERROR: {error.message}", file=sys.stderr)
        sys.exit(1)
    print(content)
