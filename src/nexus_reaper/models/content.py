"""Model for entries of a Nexus repository content listing."""

import datetime
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Self

from ..exceptions import DecodeError
from .envelope import child_text, envelope_items
from .timestamps import parse_nexus_time

__all__ = ["ContentItem", "parse_content_listing"]

LEAF_TRUE = frozenset({"1", "t", "true"})
LEAF_FALSE = frozenset({"", "0", "f", "false"})


@dataclass(frozen=True)
class ContentItem:
    """One artifact or directory entry in a repository listing.

    ``resource_uri`` identifies the entry: it is what match patterns are
    tested against, and it is the URI deleted or reported.  The timestamp is
    kept as the text Nexus sent, and only parsed when it is needed.
    """

    resource_uri: str
    last_modified: str
    text: str = ""
    leaf: bool = False

    def modified(self) -> datetime.datetime:
        """Parse ``last_modified`` into a UTC instant."""
        return parse_nexus_time(self.last_modified)

    @classmethod
    def from_element(cls, elem: ET.Element) -> Self:
        resource_uri = child_text(elem, "resourceURI")
        last_modified = child_text(elem, "lastModified", required=False)
        if not resource_uri:
            raise DecodeError("content-item has an empty resourceURI")
        leaf = (child_text(elem, "leaf", required=False) or "").lower()
        if leaf not in LEAF_TRUE | LEAF_FALSE:
            raise DecodeError(
                f"content-item {resource_uri} has non-boolean leaf '{leaf}'"
            )
        return cls(
            resource_uri=resource_uri,
            last_modified=last_modified or "",
            text=child_text(elem, "text", required=False) or "",
            leaf=leaf in LEAF_TRUE,
        )


def parse_content_listing(data: bytes | str) -> list[ContentItem]:
    """Decode a ``content`` envelope into items, in server order."""
    return [
        ContentItem.from_element(x)
        for x in envelope_items(data, "content", "content-item")
    ]
