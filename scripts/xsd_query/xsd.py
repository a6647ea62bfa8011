"""Queries over XML Schema (XSD) documents.

Stateless lookups over an already-parsed lxml tree. Every function reads
only; nothing is cached and the tree is never modified. Errors raised by
lxml propagate unchanged.

Not-found is soft: find_element, get_type_from_node_attr and
get_restricted_type return None, find_type_definition returns [].
find_restricting_facets is the exception: it requires a restriction child
and raises MissingRestrictionError without one.
"""

from __future__ import annotations

import logging

from lxml import etree

from xsd_query import xml_tools
from xsd_query.errors import InvalidOccursError, MissingRestrictionError
from xsd_query.interfaces import XmlNode
from xsd_query.types import UNBOUNDED, XS, XSI, OccursRange, TypeReference

__all__ = [
    "XS",
    "XSI",
    "find_element",
    "find_type_definition",
    "get_type_from_node_attr",
    "get_restricted_type",
    "find_restricting_facets",
    "parse_min_max_occurs",
]

logger = logging.getLogger(__name__)

# Type name is bound as $name, never interpolated.
_TYPE_DEFINITION_XPATH = (
    "//xs:complexType[@name = $name] | //xs:simpleType[@name = $name]"
)


# ─── Internal helpers ─────────────────────────────────────────────────────────


def _is_restriction(node: XmlNode) -> bool:
    return xml_tools.is_element(node, XS, "restriction")


def _describe(node: XmlNode) -> str:
    """Short label for error messages, e.g. <xs:element name='foo'>."""
    name = node.get("name")
    label = f"xs:{xml_tools.local_name(node)}"
    return f"<{label} name='{name}'>" if name else f"<{label}>"


def _parse_occurs(node: XmlNode, attr: str) -> int | float:
    value = node.get(attr)
    if value is None or value == "":
        return 1
    # allNNI is whitespace-collapsed, for the literal as well as the digits.
    text = value.strip()
    if attr == "maxOccurs" and text == "unbounded":
        return UNBOUNDED
    # int() alone would also take "+5", "1_000" and non-ASCII digits.
    if not (text.isascii() and text.isdigit()):
        raise InvalidOccursError(attr, value, _describe(node))
    return int(text, 10)


# ─── Element & type lookup ────────────────────────────────────────────────────


def find_element(doc: etree._ElementTree | XmlNode, name: str) -> XmlNode | None:
    """Return the top-level ``xs:element`` declaration called name, or None.

    Only direct children of the schema root are considered; element
    particles nested inside complex types are never returned.
    """
    root = xml_tools.document_root(doc)
    found = xml_tools.find_first_child(
        root,
        lambda child: xml_tools.is_element(child, XS, "element")
        and child.get("name") == name,
    )
    if found is None:
        logger.debug("No top-level xs:element named %r", name)
    return found


def find_type_definition(
    doc: etree._ElementTree | XmlNode, type_name: str
) -> list[XmlNode]:
    """Return every xs:complexType / xs:simpleType whose name is type_name.

    Results are in document order and may be empty or contain more than one
    definition; disambiguation is left to the caller.
    """
    matches = xml_tools.select(
        doc, _TYPE_DEFINITION_XPATH, namespaces={"xs": XS}, name=type_name
    )
    if len(matches) > 1:
        logger.debug("%d type definitions named %r", len(matches), type_name)
    return matches


# ─── Type references ──────────────────────────────────────────────────────────


def get_type_from_node_attr(
    node: XmlNode, attr_name: str, attr_namespace: str | None = None
) -> TypeReference | None:
    """Resolve a QName-valued attribute (e.g. type="xs:string") on node.

    Args:
        node: Element carrying the attribute. Its in-scope namespace
            declarations are used to resolve the prefix.
        attr_name: Local name of the attribute, e.g. "type" or "base".
        attr_namespace: Namespace of the attribute (e.g. XSI for xsi:type);
            None for an unqualified attribute.

    Returns:
        TypeReference, or None if the attribute is missing or empty.

        The value is split on its first ':'. A value without ':' is taken
        as a bare prefix: the result's name is None and its namespace is
        whatever that prefix resolves to (usually None).
    """
    value = xml_tools.get_attribute(node, attr_name, attr_namespace)
    if not value:
        return None
    prefix, sep, name = value.partition(":")
    namespace = xml_tools.lookup_namespace_uri(node, prefix)
    if namespace is None:
        logger.debug("Prefix %r in %s=%r is not bound", prefix, attr_name, value)
    return TypeReference(namespace_uri=namespace, name=name if sep else None)


def get_restricted_type(node: XmlNode) -> TypeReference | None:
    """Return the base type of node's ``xs:restriction`` child, or None if it has none."""
    restriction = xml_tools.find_first_child(node, _is_restriction)
    if restriction is None:
        return None
    return get_type_from_node_attr(restriction, "base")


def find_restricting_facets(node: XmlNode) -> list[XmlNode]:
    """Return the facet elements (children of the ``xs:restriction`` child) of node.

    Raises:
        MissingRestrictionError: node has no xs:restriction child. Check
            with get_restricted_type() before calling.
    """
    restriction = xml_tools.find_first_child(node, _is_restriction)
    if restriction is None:
        raise MissingRestrictionError(
            f"{_describe(node)} has no xs:restriction child. "
            f"find_restricting_facets() requires one. "
            f"Fix: check get_restricted_type(node) is not None before asking for facets."
        )
    return list(xml_tools.element_children(restriction))


# ─── Occurrence ───────────────────────────────────────────────────────────────


def parse_min_max_occurs(xsd_node: XmlNode) -> OccursRange:
    """Read minOccurs/maxOccurs with the XML Schema defaults (1 and 1).

    maxOccurs="unbounded" maps to UNBOUNDED.

    Raises:
        InvalidOccursError: either attribute is not a base-10 integer.
    """
    return OccursRange(
        min=_parse_occurs(xsd_node, "minOccurs"),
        max=_parse_occurs(xsd_node, "maxOccurs"),
    )
