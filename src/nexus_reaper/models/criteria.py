"""Filtering policy for a scan."""

import datetime
from dataclasses import dataclass

__all__ = ["ScanCriteria"]


@dataclass(frozen=True)
class ScanCriteria:
    """What to select from each listing.

    The cutoff is resolved once per invocation and shared by every listing
    in the run, so a long scan applies one consistent policy.
    """

    pattern: str
    cutoff: datetime.datetime
