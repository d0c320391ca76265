"""Tallies gathered during a scan."""

from dataclasses import dataclass, field

__all__ = ["ScanFailure", "ScanSummary"]


@dataclass(frozen=True)
class ScanFailure:
    """A listing that failed while errors were being isolated."""

    uri: str
    error: str


@dataclass
class ScanSummary:
    """Counts for one run of the reaper."""

    listings: int = 0
    seen: int = 0
    matched: int = 0
    applied: int = 0
    repositories: int = 0
    failures: list[ScanFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
