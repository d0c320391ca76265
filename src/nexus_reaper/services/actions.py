"""Application of an action to selected content."""

import sys
from typing import TextIO

from structlog.stdlib import BoundLogger

from ..models.action import Action, Delete, Report
from ..models.content import ContentItem
from ..storage.nexus import NexusClient

__all__ = ["ActionDispatcher"]


class ActionDispatcher:
    """Apply `Report` or `Delete` to content items.

    Items handed to `apply` have already been selected; nothing is checked
    again here.

    Parameters
    ----------
    client
        Nexus client, used for real deletions.
    logger
        Logger to use for messages.
    out
        Stream that reports are written to.
    """

    def __init__(
        self,
        client: NexusClient,
        logger: BoundLogger,
        out: TextIO | None = None,
    ) -> None:
        self._client = client
        self._logger = logger
        self._out = out if out is not None else sys.stdout

    def apply(self, action: Action, item: ContentItem) -> None:
        match action:
            case Report():
                self.report(item.resource_uri, item.last_modified)
            case Delete(dry_run=dry_run):
                self.delete(item.resource_uri, item.last_modified, dry_run)
            case _:
                raise NotImplementedError(f"Unknown action {action!r}")

    def report(self, uri: str, modified: str) -> None:
        print(f"\t{modified}\t{uri}", file=self._out)

    def delete(self, uri: str, modified: str, dry_run: bool) -> None:
        dry = " (not really)" if dry_run else ""
        self._logger.info(f"Deleting {uri}{dry}", modified=modified)
        if dry_run:
            return
        self._client.delete(uri)
