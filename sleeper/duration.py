from typing import Tuple

from sleeper.errors import DurationError

SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# largest delay accepted, the range of an unsigned 64-bit counter
MAX_SECONDS = 2 ** 64 - 1

LINE_FORMAT = "Sleeping after {}d {}h {}m {}s. Press Ctrl+c to cancel."


def resolve_seconds(seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> int:
    """Sum the four inputs into a total number of seconds."""
    for unit, value in (("seconds", seconds), ("minutes", minutes),
                        ("hours", hours), ("days", days)):
        if value < 0:
            raise DurationError(f"{unit} must not be negative, got {value}")

    total = seconds + minutes * MINUTE + hours * HOUR + days * DAY
    if total > MAX_SECONDS:
        raise DurationError(f"Requested delay of {total} seconds is too large (max {MAX_SECONDS})")
    return total


def decompose(total: int) -> Tuple[int, int, int, int]:
    """Split seconds into (days, hours, minutes, seconds), largest unit first."""
    parts = []
    for mult in (DAY, HOUR, MINUTE, SECOND):
        parts.append(total // mult)
        total = total % mult
    return tuple(parts)


def format_remaining(total: int) -> str:
    return LINE_FORMAT.format(*decompose(total))
