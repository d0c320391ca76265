"""Exceptions raised by the Nexus reaper."""

__all__ = [
    "DecodeError",
    "InvalidPattern",
    "InvalidTimeFormat",
    "ReaperError",
    "TransportError",
]


class ReaperError(Exception):
    """Base class for all errors raised while scanning a Nexus host."""


class TransportError(ReaperError):
    """A request to the repository manager failed.

    Covers connection failures as well as responses with a non-2xx status.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DecodeError(ReaperError):
    """A listing response could not be decoded."""


class InvalidTimeFormat(ReaperError):  # noqa: N818
    """A timestamp matched none of the accepted layouts."""


class InvalidPattern(ReaperError):  # noqa: N818
    """A match pattern is not a valid regular expression."""
