"""Model for repository descriptors reported by a Nexus host."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Self

from .envelope import child_text, envelope_items

__all__ = ["Repository", "parse_repository_listing"]


@dataclass(frozen=True)
class Repository:
    """A repository known to a Nexus host.  Only used for display."""

    id: str
    name: str = ""
    format: str = ""
    effective_local_storage_url: str = ""
    resource_uri: str = ""
    content_resource_uri: str = ""

    def __str__(self) -> str:
        return f"{self.id};\t\t{self.name};\t{self.format}"

    @classmethod
    def from_element(cls, elem: ET.Element) -> Self:
        def opt(tag: str) -> str:
            return child_text(elem, tag, required=False) or ""

        return cls(
            id=child_text(elem, "id") or "",
            name=opt("name"),
            format=opt("format"),
            effective_local_storage_url=opt("effectiveLocalStorageUrl"),
            resource_uri=opt("resourceURI"),
            content_resource_uri=opt("contentResourceURI"),
        )


def parse_repository_listing(data: bytes | str) -> list[Repository]:
    """Decode a ``repositories`` envelope into descriptors."""
    return [
        Repository.from_element(x)
        for x in envelope_items(data, "repositories", "repositories-item")
    ]
