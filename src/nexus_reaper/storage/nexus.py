"""Minimalist function set of the Nexus 2 REST API.

We must be able to list repositories, to list the content of a repository
path, and to delete content.
"""

import httpx
from structlog.stdlib import BoundLogger

from ..exceptions import TransportError
from ..models.content import ContentItem, parse_content_listing
from ..models.repository import Repository, parse_repository_listing

__all__ = ["NexusClient"]


class NexusClient:
    """Client for talking to one or more Nexus hosts.

    Note that this is synchronous.  Listings and deletions are issued one
    at a time, in the order the caller asks for them.

    Parameters
    ----------
    http_client
        Client used for all requests.
    logger
        Logger to use for messages.
    """

    def __init__(self, http_client: httpx.Client, logger: BoundLogger) -> None:
        self._http_client = http_client
        self._logger = logger

    def _request(self, method: str, uri: str) -> httpx.Response:
        self._logger.debug(f"{method} {uri}")
        try:
            r = self._http_client.request(method, uri)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {uri} failed: {exc}") from exc
        self._logger.debug(f"Result (status): {r.status_code}")
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{method} {uri} returned {r.status_code}",
                status=r.status_code,
            ) from exc
        return r

    def list_repositories(self, host_url: str) -> list[Repository]:
        """List every repository known to a host.

        Parameters
        ----------
        host_url
            Base URL of the Nexus application, with a trailing slash.
        """
        r = self._request("GET", f"{host_url}service/local/all_repositories")
        repos = parse_repository_listing(r.content)
        self._logger.debug(f"Found {len(repos)} repositories at {host_url}")
        return repos

    def list_content(self, uri: str) -> list[ContentItem]:
        """List the content at a repository content URI.

        Only what the server returns in a single response is listed.
        Each call fetches the listing anew.
        """
        r = self._request("GET", uri)
        items = parse_content_listing(r.content)
        self._logger.debug(f"Found {len(items)} items at {uri}")
        return items

    def delete(self, uri: str) -> None:
        """Delete the content at ``uri``.

        Raises
        ------
        TransportError
            Raised if the request fails or Nexus answers with a non-2xx
            status.
        """
        self._request("DELETE", uri)
