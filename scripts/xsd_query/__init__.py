"""XSD query helpers — public API.

Lookups over XML Schema documents parsed with lxml. The XSD-specific
queries sit beside the generic traversal helpers they are built from;
both are re-exported here.

Public API (re-exported from submodules):

Constants (from types.py):
    XS        — http://www.w3.org/2001/XMLSchema
    XSI       — http://www.w3.org/2001/XMLSchema-instance
    UNBOUNDED — maxOccurs="unbounded" (positive infinity)

Frozen Dataclasses (from types.py):
    TypeReference — resolved qualified name: namespace_uri, name
    OccursRange   — minOccurs/maxOccurs bounds: min, max

XSD Queries (from xsd.py):
    find_element(doc, name)                       — top-level xs:element or None
    find_type_definition(doc, type_name)          — list of matching complex/simple types
    get_type_from_node_attr(node, attr, ns=None)  — TypeReference or None
    get_restricted_type(node)                     — base of xs:restriction or None
    find_restricting_facets(node)                 — facet elements of xs:restriction
    parse_min_max_occurs(node)                    — OccursRange

XML Helpers (module xml_tools):
    xml_tools.find_first_child, xml_tools.lookup_namespace_uri,
    xml_tools.select, xml_tools.parse_document, ...

Protocol Interfaces (runtime_checkable, from interfaces.py):
    XmlNode — DOM capability set the queries rely on

Exceptions (from errors.py):
    XsdQueryError           — base class
    MissingRestrictionError — facets requested without an xs:restriction child
    InvalidOccursError      — malformed minOccurs/maxOccurs
    XmlDocumentError        — unreadable or malformed schema document
"""

from xsd_query import xml_tools
from xsd_query.errors import (
    InvalidOccursError,
    MissingRestrictionError,
    XmlDocumentError,
    XsdQueryError,
)
from xsd_query.interfaces import XmlNode
from xsd_query.types import (
    UNBOUNDED,
    XS,
    XSI,
    OccursRange,
    TypeReference,
)
from xsd_query.xml_tools import parse_document
from xsd_query.xsd import (
    find_element,
    find_restricting_facets,
    find_type_definition,
    get_restricted_type,
    get_type_from_node_attr,
    parse_min_max_occurs,
)

__all__ = [
    # Constants
    "XS",
    "XSI",
    "UNBOUNDED",
    # Frozen dataclasses
    "TypeReference",
    "OccursRange",
    # XSD queries
    "find_element",
    "find_type_definition",
    "get_type_from_node_attr",
    "get_restricted_type",
    "find_restricting_facets",
    "parse_min_max_occurs",
    # XML helpers
    "xml_tools",
    "parse_document",
    # Protocol interfaces
    "XmlNode",
    # Exceptions
    "XsdQueryError",
    "MissingRestrictionError",
    "InvalidOccursError",
    "XmlDocumentError",
]
