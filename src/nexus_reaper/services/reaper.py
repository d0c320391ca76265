"""Provides reaping services for a set of Nexus hosts."""

import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from structlog.stdlib import BoundLogger

from ..config import ReaperConfig
from ..exceptions import ReaperError
from ..models.action import Action, Delete, Report
from ..models.criteria import ScanCriteria
from ..models.scan_mode import ScanMode
from ..models.summary import ScanFailure, ScanSummary
from ..storage.nexus import NexusClient
from .actions import ActionDispatcher
from .matcher import filter_content

__all__ = ["Reaper"]


class Reaper:
    """Scans every (host, repository, path) combination and applies an
    action to the content selected from each listing.

    Parameters
    ----------
    cfg
        Reaper configuration.
    criteria
        Selection policy, fixed for the whole run.
    client
        Nexus client.
    dispatcher
        Applies actions to selected content.
    logger
        Logger to use for messages.
    out
        Stream for repository listings.
    """

    def __init__(
        self,
        cfg: ReaperConfig,
        criteria: ScanCriteria,
        client: NexusClient,
        dispatcher: ActionDispatcher,
        logger: BoundLogger,
        out: TextIO | None = None,
    ) -> None:
        self._hosts = cfg.hosts
        self._repositories = cfg.repositories
        self._paths = cfg.paths
        self._mode = cfg.mode
        self._dry_run = cfg.dry_run
        self._keep_going = cfg.keep_going
        self._base_path = cfg.base_path.strip("/")
        self._criteria = criteria
        self._client = client
        self._dispatcher = dispatcher
        self._logger = logger
        self._out = out if out is not None else sys.stdout

    def host_url(self, host: str) -> str:
        """Base URL of the Nexus application on ``host``."""
        if host.startswith(("http://", "https://")):
            url = host.rstrip("/") + "/"
        else:
            url = f"http://{host}/"
        if self._base_path:
            url += self._base_path + "/"
        return url

    def content_uri(self, host: str, repository: str, path: str) -> str:
        return (
            f"{self.host_url(host)}service/local/repositories/{repository}"
            f"/content/{path}"
        )

    def triples(self) -> Iterator[tuple[str, str, str]]:
        """Every (host, repository, path), in declared order."""
        for host in self._hosts:
            for repository in self._repositories:
                for path in self._paths:
                    yield host, repository, path

    def action(self, mode: ScanMode) -> Action:
        match mode:
            case ScanMode.REPORT:
                return Report()
            case ScanMode.DELETE:
                return Delete(dry_run=self._dry_run)
            case _:
                raise NotImplementedError(f"No action for mode {mode}")

    def run(self, mode: ScanMode | None = None) -> ScanSummary:
        """Run the scan.

        Unless ``keep_going`` is configured, the first error aborts the
        run.  Deletions already made are not undone.
        """
        mode = mode or self._mode
        summary = ScanSummary()
        if mode is None:
            self._logger.warning("No mode selected; nothing to do")
            return summary
        if mode == ScanMode.REPOSITORIES:
            for host in self._hosts:
                self._guarded(
                    summary, host, self._report_repositories, host, summary
                )
        else:
            action = self.action(mode)
            for host, repository, path in self.triples():
                uri = self.content_uri(host, repository, path)
                self._guarded(summary, uri, self._scan, uri, action, summary)
        self._logger.info(
            f"Scan complete: {summary.matched} of {summary.seen} items"
            f" selected in {summary.listings} listings",
            failures=len(summary.failures),
        )
        return summary

    def _guarded(
        self,
        summary: ScanSummary,
        target: str,
        fn: Callable[..., None],
        *args: object,
    ) -> None:
        try:
            fn(*args)
        except ReaperError as exc:
            if not self._keep_going:
                raise
            self._logger.error(f"Failed on {target}: {exc}")
            summary.failures.append(ScanFailure(uri=target, error=str(exc)))

    def _scan(self, uri: str, action: Action, summary: ScanSummary) -> None:
        items = self._client.list_content(uri)
        summary.listings += 1
        summary.seen += len(items)
        for item in filter_content(items, self._criteria):
            summary.matched += 1
            self._dispatcher.apply(action, item)
            summary.applied += 1

    def _report_repositories(self, host: str, summary: ScanSummary) -> None:
        repos = self._client.list_repositories(self.host_url(host))
        summary.repositories += len(repos)
        print(f"--== Found {len(repos)} repositories ==-- ", file=self._out)
        for repo in repos:
            print(repo, file=self._out)
