"""Component factory."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator
from contextlib import closing, contextmanager
from typing import Self, TextIO

import httpx
import structlog
from structlog.stdlib import BoundLogger

from .config import ReaperConfig
from .models.criteria import ScanCriteria
from .models.timestamps import resolve_cutoff
from .services.actions import ActionDispatcher
from .services.reaper import Reaper
from .storage.nexus import NexusClient

__all__ = ["Factory", "configure_logging"]


def configure_logging(debug: bool) -> None:
    """Configure structlog once, at process start."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level)
    )


class Factory:
    """Build reaper components.

    Parameters
    ----------
    config
        Reaper configuration.
    http_client
        Client for all requests to Nexus.  Closed by `close`.
    logger
        Logger to use for messages.
    out
        Stream for reports and listings; standard output if not given.
    """

    @classmethod
    @contextmanager
    def standalone(
        cls, config: ReaperConfig, out: TextIO | None = None
    ) -> Iterator[Self]:
        """Context manager for reaper components.

        Configures logging, so this should be used once per process.

        Parameters
        ----------
        config
            Reaper configuration.
        out
            Stream for reports and listings.

        Yields
        ------
        Factory
            Newly-created factory.  Its HTTP client is closed on exit.
        """
        configure_logging(config.debug)
        logger = structlog.get_logger("nexus_reaper")
        http_client = httpx.Client(timeout=config.timeout)
        factory = cls(config, http_client, logger, out)
        with closing(factory):
            yield factory

    def __init__(
        self,
        config: ReaperConfig,
        http_client: httpx.Client,
        logger: BoundLogger,
        out: TextIO | None = None,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._logger = logger
        self._out = out

    def close(self) -> None:
        self._http_client.close()

    def create_criteria(
        self, now: datetime.datetime | None = None
    ) -> ScanCriteria:
        """Resolve the configured pattern and cutoff.

        Raises
        ------
        InvalidTimeFormat
            Raised if the configured ``before`` cannot be parsed.
        """
        cutoff = resolve_cutoff(self._config.before, self._config.age, now)
        self._logger.debug(f"Selecting content modified before {cutoff}")
        return ScanCriteria(pattern=self._config.regexp, cutoff=cutoff)

    def create_nexus_client(self) -> NexusClient:
        return NexusClient(self._http_client, self._logger)

    def create_dispatcher(self) -> ActionDispatcher:
        return ActionDispatcher(
            self.create_nexus_client(), self._logger, self._out
        )

    def create_reaper(self, criteria: ScanCriteria | None = None) -> Reaper:
        if criteria is None:
            criteria = self.create_criteria()
        return Reaper(
            cfg=self._config,
            criteria=criteria,
            client=self.create_nexus_client(),
            dispatcher=self.create_dispatcher(),
            logger=self._logger,
            out=self._out,
        )
