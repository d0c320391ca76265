"""Actions which may be applied to selected content."""

from dataclasses import dataclass

__all__ = ["Action", "Delete", "Report"]


@dataclass(frozen=True)
class Report:
    """Print each selected item."""


@dataclass(frozen=True)
class Delete:
    """Delete each selected item; with ``dry_run``, only say so."""

    dry_run: bool = True


type Action = Report | Delete
