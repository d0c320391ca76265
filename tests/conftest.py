"""Test fixtures for Nexus reaper."""

from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import httpx
import pytest
import structlog
from structlog.stdlib import BoundLogger

from nexus_reaper.config import ReaperConfig
from nexus_reaper.factory import Factory

SUPPORT_DIR = Path(__file__).parent / "support"
HOST_URL = "http://localhost:8000/nexus/"
CONTENT_URL = f"{HOST_URL}service/local/repositories"


class FakeNexus:
    """Canned Nexus responses, keyed by method and URL.

    Every request is recorded, whether or not a response was registered
    for it.  Unregistered URLs get a 404.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], tuple[int, str]] = {}
        self.unreachable: set[str] = set()
        self.requests: list[httpx.Request] = []

    def add(
        self, method: str, url: str, body: str = "", status: int = 200
    ) -> None:
        self.responses[(method, url)] = (status, body)

    def add_file(self, url: str, name: str) -> None:
        self.add("GET", url, (SUPPORT_DIR / name).read_text())

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host in self.unreachable:
            raise httpx.ConnectError("Connection refused", request=request)
        status, body = self.responses.get(
            (request.method, str(request.url)), (404, "Not Found")
        )
        return httpx.Response(status, text=body)

    def calls(self, method: str) -> list[str]:
        return [str(x.url) for x in self.requests if x.method == method]


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def support_dir() -> Path:
    return SUPPORT_DIR


@pytest.fixture
def nexus() -> FakeNexus:
    return FakeNexus()


@pytest.fixture
def http_client(nexus: FakeNexus) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(nexus.handler)) as c:
        yield c


@pytest.fixture
def logger() -> BoundLogger:
    return structlog.get_logger("nexus_reaper")


@pytest.fixture
def out() -> StringIO:
    return StringIO()


@pytest.fixture
def cfg() -> ReaperConfig:
    """Config for a report on one path of one repository."""
    return ReaperConfig(
        hosts=["localhost:8000"],
        repositories=["jts-release"],
        paths=["org/example/app/"],
        before="2023-12-31",
    )


@pytest.fixture
def factory(
    cfg: ReaperConfig,
    http_client: httpx.Client,
    logger: BoundLogger,
    out: StringIO,
) -> Factory:
    return Factory(cfg, http_client, logger, out)
