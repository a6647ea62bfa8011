"""Structural interface for the DOM nodes the XSD queries operate on.

The queries never import a concrete element class. Anything exposing the
members below is accepted; lxml.etree elements satisfy it as they are.

## runtime_checkable limitations

isinstance(obj, XmlNode) only confirms that the members exist, not that
their signatures match. Static checkers (mypy/pyright) enforce the full
contract; the runtime check is a convenience only.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol, runtime_checkable


@runtime_checkable
class XmlNode(Protocol):
    """A namespace-aware element in a parsed XML tree.

    Members:
        tag       — Clark-notation name ``{namespace}local`` (or ``local``
                    outside any namespace). Non-element nodes such as
                    comments expose a non-str tag.
        nsmap     — in-scope prefix → URI map at this element; the default
                    namespace is keyed by None.
        get()     — attribute lookup by (Clark-notation) name.
        iterchildren() — child nodes in document order.
        xpath()   — XPath 1.0 evaluation with bound variables.
    """

    tag: Any

    @property
    def nsmap(self) -> Mapping[str | None, str]:
        ...

    def get(self, key: str, default: str | None = None) -> str | None:
        ...

    def iterchildren(self, *args: Any, **kwargs: Any) -> Iterator[Any]:
        ...

    def xpath(self, _path: str, **kwargs: Any) -> Any:
        ...
