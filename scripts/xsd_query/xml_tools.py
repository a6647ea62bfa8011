"""Generic XML traversal helpers over lxml trees.

Nothing in this module knows about XML Schema; xsd.py composes these
helpers into XSD-specific queries.

Public API:
    local_name(el)                    — local part of an element's tag
    namespace_uri(el)                 — namespace part of an element's tag (or None)
    is_element(node, ns, local)       — namespace + local-name test, elements only
    element_children(node)            — element children in document order
    find_first_child(node, predicate) — first element child matching predicate
    lookup_namespace_uri(node, prefix) — in-scope prefix resolution at node
    get_attribute(node, name, ns)     — attribute value or None
    select(doc, expression, ...)      — parameterised XPath returning elements
    document_root(doc)                — tree-or-element → root element
    parse_document(source)            — load a document (wraps parse errors)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, Mapping

from lxml import etree

from xsd_query.errors import XmlDocumentError
from xsd_query.interfaces import XmlNode

logger = logging.getLogger(__name__)

# Entities are not expanded and nothing is fetched over the network.
_PARSER_OPTIONS = {"resolve_entities": False, "no_network": True}


# ─── Names ────────────────────────────────────────────────────────────────────


def _is_element_node(node: XmlNode) -> bool:
    # Comments and processing instructions carry a non-str tag.
    return isinstance(node.tag, str)


def local_name(el: XmlNode) -> str:
    """Return the tag without its ``{namespace}`` part."""
    return etree.QName(el.tag).localname


def namespace_uri(el: XmlNode) -> str | None:
    """Return the element's namespace URI, or None outside any namespace."""
    return etree.QName(el.tag).namespace


def is_element(node: XmlNode, namespace: str | None, local: str) -> bool:
    """True if node is an element named ``{namespace}local``."""
    if not _is_element_node(node):
        return False
    qname = etree.QName(node.tag)
    return qname.namespace == namespace and qname.localname == local


# ─── Children ─────────────────────────────────────────────────────────────────


def element_children(node: XmlNode) -> Iterator[XmlNode]:
    """Yield element children of node in document order, skipping comments and PIs."""
    for child in node.iterchildren():
        if _is_element_node(child):
            yield child


def find_first_child(
    node: XmlNode, predicate: Callable[[XmlNode], bool]
) -> XmlNode | None:
    """Return the first element child for which predicate is true, else None."""
    for child in element_children(node):
        if predicate(child):
            return child
    return None


# ─── Namespaces & attributes ──────────────────────────────────────────────────


def lookup_namespace_uri(node: XmlNode, prefix: str | None) -> str | None:
    """Resolve prefix against the declarations in scope at node.

    None or "" looks up the default namespace. Returns None for an unbound
    prefix. The ``xml`` prefix is always bound.
    """
    if prefix == "xml":
        return "http://www.w3.org/XML/1998/namespace"
    nsmap: Mapping[str | None, str] = node.nsmap
    return nsmap.get(prefix or None)


def get_attribute(
    node: XmlNode, name: str, namespace: str | None = None
) -> str | None:
    """Return the value of attribute name (in namespace, if given), or None."""
    key = f"{{{namespace}}}{name}" if namespace else name
    return node.get(key)


# ─── Documents ────────────────────────────────────────────────────────────────


def document_root(doc: etree._ElementTree | XmlNode) -> XmlNode:
    """Return the root element of doc, which may be a tree or an element."""
    if isinstance(doc, etree._ElementTree):
        return doc.getroot()
    return doc.getroottree().getroot()


def select(
    doc: etree._ElementTree | XmlNode,
    expression: str,
    namespaces: Mapping[str, str] | None = None,
    **variables: str,
) -> list[XmlNode]:
    """Evaluate an XPath expression over doc and return the matching elements.

    Caller-supplied values must be passed as keyword variables and
    referenced as ``$name`` in the expression; they are never spliced into
    the expression text. Non-element results (strings, numbers) are dropped.
    """
    root = document_root(doc)
    result = root.xpath(expression, namespaces=namespaces or {}, **variables)
    if not isinstance(result, list):
        return []
    return [r for r in result if etree.iselement(r) and _is_element_node(r)]


def parse_document(source: str | Path | bytes) -> etree._ElementTree:
    """Parse a schema document.

    Args:
        source: A filesystem path (str or Path), or the raw document bytes.

    Returns:
        The parsed lxml element tree.

    Raises:
        XmlDocumentError: the file cannot be read or is not well-formed XML.
    """
    parser = etree.XMLParser(**_PARSER_OPTIONS)
    if isinstance(source, bytes):
        where = "<bytes>"
        try:
            return etree.fromstring(source, parser).getroottree()
        except etree.XMLSyntaxError as e:
            raise XmlDocumentError(
                f"XML parse error in {where}: {e}. "
                f"Fix: supply a well-formed XML document."
            ) from e

    path = Path(source)
    logger.debug("Parsing %s", path)
    try:
        return etree.parse(str(path), parser)
    except etree.XMLSyntaxError as e:
        raise XmlDocumentError(
            f"XML parse error in {path}: {e}. "
            f"Fix: correct the document so it is well-formed XML."
        ) from e
    except OSError as e:
        raise XmlDocumentError(
            f"Cannot read {path}: {e}. "
            f"Fix: check that the file exists and is readable."
        ) from e
