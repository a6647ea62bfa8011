"""Exceptions raised by xsd_query.

Lookups that find nothing return None or an empty list; the exceptions
here cover broken preconditions, malformed attribute values and documents
that cannot be loaded.

Actionable: each message describes what went wrong, where, and how to fix it.
"""

from __future__ import annotations


class XsdQueryError(Exception):
    """Base class for all xsd_query errors."""


class MissingRestrictionError(XsdQueryError, LookupError):
    """Raised when facets are requested from a node with no xs:restriction child.

    Callers are expected to check with get_restricted_type() first.
    """


class InvalidOccursError(XsdQueryError, ValueError):
    """Raised when minOccurs/maxOccurs is not a base-10 integer (or 'unbounded')."""

    def __init__(self, attr: str, value: str, context: str) -> None:
        self.attr = attr
        self.value = value
        super().__init__(
            f"Invalid {attr}='{value}' on {context}. "
            f"{attr} must be a non-negative integer"
            + (" or 'unbounded'" if attr == "maxOccurs" else "")
            + ". Fix: correct the attribute value in the schema."
        )


class XmlDocumentError(XsdQueryError):
    """Raised when a schema document cannot be read or is not well-formed XML."""
