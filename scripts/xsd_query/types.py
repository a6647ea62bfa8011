"""Value types and namespace constants for XSD queries.

All dataclasses are frozen: query results are plain values, compared
structurally, and never tied to the DOM node they were read from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# ─── Namespaces ───────────────────────────────────────────────────────────────

XS = "http://www.w3.org/2001/XMLSchema"
XSI = "http://www.w3.org/2001/XMLSchema-instance"

# maxOccurs="unbounded"
UNBOUNDED: float = math.inf


# ─── Frozen Dataclasses ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class TypeReference:
    """A resolved qualified type name, e.g. ``xs:string``.

    namespace_uri is the URI bound to the prefix at the element the reference
    was read from, or None when the prefix is not bound there.
    name is None when the attribute value had no ``prefix:`` separator.
    """

    namespace_uri: str | None
    name: str | None

    @property
    def clark(self) -> str | None:
        """``{namespace}name`` form, or None if either part is missing."""
        if self.namespace_uri is None or self.name is None:
            return None
        return f"{{{self.namespace_uri}}}{self.name}"

    def __str__(self) -> str:
        # Missing parts render as "?".
        return f"{{{self.namespace_uri or '?'}}}{self.name or '?'}"


@dataclass(frozen=True)
class OccursRange:
    """minOccurs/maxOccurs bounds of a particle.

    max is UNBOUNDED (positive infinity) for maxOccurs="unbounded".
    min <= max is not checked.
    """

    min: int
    max: int | float

    @property
    def is_unbounded(self) -> bool:
        return self.max == UNBOUNDED

    def __str__(self) -> str:
        upper = "unbounded" if self.is_unbounded else str(self.max)
        return f"{self.min}..{upper}"
