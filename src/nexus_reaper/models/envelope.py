"""Decoding of the XML envelopes returned by the Nexus REST interface.

Both listings share a shape: a named root element, a ``data`` child, and a
run of item elements underneath it.
"""

import xml.etree.ElementTree as ET

from defusedxml import ElementTree as DefusedET
from defusedxml.common import DefusedXmlException

from ..exceptions import DecodeError

__all__ = ["child_text", "envelope_items"]


def envelope_items(
    data: bytes | str, root: str, item: str
) -> list[ET.Element]:
    """Return the item elements of a listing envelope, in document order.

    Parameters
    ----------
    data
        Raw response body.
    root
        Expected tag of the root element (``content`` or ``repositories``).
    item
        Tag of each item below ``data``.

    Raises
    ------
    DecodeError
        Raised if the body is not XML, declares entities, or is not the
        expected envelope.
    """
    try:
        tree = DefusedET.fromstring(data)
    except (ET.ParseError, DefusedXmlException) as exc:
        raise DecodeError(f"Malformed '{root}' listing: {exc}") from exc
    if tree.tag != root:
        raise DecodeError(
            f"Expected '{root}' listing, got root element '{tree.tag}'"
        )
    body = tree.find("data")
    if body is None:
        # An envelope without a data element holds no items.
        return []
    return body.findall(item)


def child_text(
    elem: ET.Element, tag: str, *, required: bool = True
) -> str | None:
    """Return the stripped text of a direct child element.

    A missing child is an error if ``required``; an empty child is ``""``.
    """
    child = elem.find(tag)
    if child is None:
        if required:
            raise DecodeError(f"'{elem.tag}' element has no '{tag}'")
        return None
    return (child.text or "").strip()
