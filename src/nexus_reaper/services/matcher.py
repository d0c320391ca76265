"""Selection of content by name pattern and age."""

import re
from collections.abc import Iterable, Iterator

from ..exceptions import InvalidPattern
from ..models.content import ContentItem
from ..models.criteria import ScanCriteria

__all__ = ["compile_pattern", "filter_content"]


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPattern(f"Invalid pattern '{pattern}': {exc}") from exc


def filter_content(
    items: Iterable[ContentItem], criteria: ScanCriteria
) -> Iterator[ContentItem]:
    """Yield the items selected by ``criteria``, in input order.

    An item is selected if the pattern is found in its resource URI and it
    was last modified strictly before the cutoff.  The timestamp is only
    parsed for items whose URI matches; a malformed timestamp on such an
    item raises `~nexus_reaper.exceptions.InvalidTimeFormat`.

    The pattern is compiled when this is called, not lazily, so a bad
    pattern is reported before any item is considered.
    """
    regex = compile_pattern(criteria.pattern)
    return (x for x in items if _selected(x, regex, criteria))


def _selected(
    item: ContentItem, regex: re.Pattern[str], criteria: ScanCriteria
) -> bool:
    if not regex.search(item.resource_uri):
        return False
    return item.modified() < criteria.cutoff
