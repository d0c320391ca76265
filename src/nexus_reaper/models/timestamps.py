"""Parsing of cutoff times and of timestamps emitted by Nexus."""

import datetime
import re

from safir.datetime import current_datetime

from ..exceptions import InvalidTimeFormat

DATEFMT = "%Y-%m-%d %H:%M:%S"
SHORT_DATEFMT = "%Y-%m-%d"
TIME_LAYOUTS = (DATEFMT, SHORT_DATEFMT)
"""Accepted layouts for a user-supplied cutoff, tried in this order."""

# Nexus always reports UTC, with an optional fractional second:
# 2015-03-18 15:18:53.0 UTC
_NEXUS_TIME = re.compile(
    r"^(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))? UTC$"
)

__all__ = [
    "DATEFMT",
    "SHORT_DATEFMT",
    "TIME_LAYOUTS",
    "parse_nexus_time",
    "resolve_cutoff",
    "resolve_time",
]


def resolve_time(text: str) -> datetime.datetime:
    """Parse a cutoff given on the command line or in configuration.

    Parameters
    ----------
    text
        Either ``YYYY-MM-DD HH:MM:SS`` or ``YYYY-MM-DD``.  Both are local
        wall-clock times; a bare date means local midnight.

    Returns
    -------
    datetime.datetime
        Timezone-aware instant in the local zone.

    Raises
    ------
    InvalidTimeFormat
        Raised if ``text`` matches none of the accepted layouts.
    """
    for layout in TIME_LAYOUTS:
        try:
            naive = datetime.datetime.strptime(text, layout)
        except ValueError:
            continue
        return naive.astimezone()
    raise InvalidTimeFormat(
        f"'{text}' does not match any of: {', '.join(TIME_LAYOUTS)}"
    )


def parse_nexus_time(text: str) -> datetime.datetime:
    """Parse a ``lastModified`` value from a Nexus content listing.

    This layout is fixed by the server and is not configurable.  A failure
    here means the response is not what we expect from Nexus.
    """
    match = _NEXUS_TIME.match(text.strip())
    if match is None:
        raise InvalidTimeFormat(f"Malformed Nexus timestamp '{text}'")
    try:
        stamp = datetime.datetime.strptime(match.group("stamp"), DATEFMT)
    except ValueError as exc:
        raise InvalidTimeFormat(f"Malformed Nexus timestamp '{text}'") from exc
    fraction = match.group("fraction") or "0"
    micros = int(fraction[:6].ljust(6, "0"))
    return stamp.replace(microsecond=micros, tzinfo=datetime.UTC)


def resolve_cutoff(
    before: str | None = None,
    age: datetime.timedelta | None = None,
    now: datetime.datetime | None = None,
) -> datetime.datetime:
    """Resolve the single cutoff instant used for a whole run.

    At most one of ``before`` and ``age`` may be given.  With neither, the
    cutoff is the current time to the second.
    """
    if before is not None and age is not None:
        raise ValueError("Specify at most one of 'before' and 'age'")
    if before is not None:
        return resolve_time(before)
    if now is None:
        now = current_datetime()
    now = now.replace(microsecond=0).astimezone()
    if age is not None:
        return now - age
    return now
