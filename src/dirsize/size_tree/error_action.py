"""Error action enum for handling unreadable entries during size aggregation."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a descendant entry cannot be listed or measured.

    The entry is always skipped and the walk continues; the action only controls
    whether the skip is reported.

    Values:
        IGNORE: Skip the entry silently (default behavior)
        WARN: Skip the entry and print a warning to stderr
    """

    IGNORE = "ignore"
    WARN = "warn"
