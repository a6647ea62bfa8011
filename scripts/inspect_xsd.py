#!/usr/bin/env python3
"""Inspect element declarations and type definitions in an XSD file.

Usage:
    scripts/inspect_xsd.py SCHEMA element NAME   # top-level xs:element
    scripts/inspect_xsd.py SCHEMA type NAME      # xs:complexType / xs:simpleType
    XSD_QUERY_LOG_LEVEL=DEBUG scripts/inspect_xsd.py SCHEMA type NAME

Configuration (CLI args take precedence over env vars):
    --log-level   logging level (env: XSD_QUERY_LOG_LEVEL, default: "WARNING")

Exit codes: 0=found, 1=not found, 2=file/parse/schema error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from xsd_query import (
    XmlDocumentError,
    XsdQueryError,
    find_element,
    find_restricting_facets,
    find_type_definition,
    get_restricted_type,
    get_type_from_node_attr,
    parse_document,
    parse_min_max_occurs,
    xml_tools,
)
from xsd_query.types import XS

logger = logging.getLogger("inspect_xsd")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with environment variable fallbacks.

    Args:
        argv: Argument list to parse. If None, reads from sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        prog="inspect_xsd",
        description="Look up element declarations and type definitions in an XSD file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("schema", type=Path, help="Path to the .xsd file")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("XSD_QUERY_LOG_LEVEL", "WARNING"),
        help="Logging level (env: XSD_QUERY_LOG_LEVEL, default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="subcommand", metavar="<subcommand>")
    subparsers.required = True

    element = subparsers.add_parser("element", help="Show a top-level xs:element")
    element.add_argument("name")
    type_ = subparsers.add_parser("type", help="Show xs:complexType/xs:simpleType definitions")
    type_.add_argument("name")

    return parser.parse_args(argv)


# ─── Rendering ────────────────────────────────────────────────────────────────


def _facet_lines(node) -> list[str]:
    lines = []
    for facet in find_restricting_facets(node):
        value = facet.get("value")
        label = xml_tools.local_name(facet)
        lines.append(f"    {label}={value!r}" if value is not None else f"    {label}")
    return lines


def _restriction_lines(node) -> list[str]:
    base = get_restricted_type(node)
    if base is None:
        return []
    return [f"  restriction base: {base}", *_facet_lines(node)]


def describe_element(element) -> list[str]:
    """Render a top-level element declaration as printable lines."""
    lines = [f"element {element.get('name')}"]
    type_ref = get_type_from_node_attr(element, "type")
    if type_ref is not None:
        lines.append(f"  type: {type_ref}")
    lines.append(f"  occurs: {parse_min_max_occurs(element)}")
    inline = xml_tools.find_first_child(
        element, lambda c: xml_tools.is_element(c, XS, "simpleType")
    )
    if inline is not None:
        lines.append("  inline simpleType")
        lines.extend(_restriction_lines(inline))
    return lines


def describe_type(definition) -> list[str]:
    """Render a complexType/simpleType definition as printable lines."""
    lines = [f"{xml_tools.local_name(definition)} {definition.get('name')}"]
    lines.extend(_restriction_lines(definition))
    return lines


# ─── CLI ──────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code: 0=found, 1=not found, 2=file/parse/schema error."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        doc = parse_document(args.schema)
    except XmlDocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logger.info("Loaded %s", args.schema)

    try:
        lines = _render(doc, args)
    except XsdQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if lines is None:
        return 1
    print("\n".join(lines))
    return 0


def _render(doc, args: argparse.Namespace) -> list[str] | None:
    """Output lines for the requested lookup, or None (after reporting) if nothing matched."""
    if args.subcommand == "element":
        element = find_element(doc, args.name)
        if element is None:
            print(f"No top-level element '{args.name}' in {args.schema.name}", file=sys.stderr)
            return None
        return describe_element(element)

    definitions = find_type_definition(doc, args.name)
    if not definitions:
        print(f"No type '{args.name}' in {args.schema.name}", file=sys.stderr)
        return None
    if len(definitions) > 1:
        logger.warning("%d definitions named '%s'", len(definitions), args.name)
    blocks = ["\n".join(describe_type(d)) for d in definitions]
    return ["\n\n".join(blocks)]


if __name__ == "__main__":
    sys.exit(main())
