from enum import Enum


class ScanMode(Enum):
    """What an invocation does with each host.  These are mutually
    exclusive; listing repositories takes precedence over reporting, which
    takes precedence over deleting.
    """

    REPOSITORIES = "repositories"
    REPORT = "report"
    DELETE = "delete"
