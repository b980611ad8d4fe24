"""Elapsed-time formatting.

Both presentations pick the tier of the largest nonzero unit and show every
unit from there down to seconds. Arithmetic is plain base 60/24, not
calendar aware.
"""

from typing import Tuple

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400


def split_duration(total: int) -> Tuple[int, int, int, int]:
    """Split seconds into (days, hours, minutes, seconds).

    Raises:
        ValueError: If ``total`` is negative
    """
    if total < 0:
        raise ValueError(f"Elapsed time cannot be negative: {total}")

    days = total // SECONDS_PER_DAY
    hours = (total // SECONDS_PER_HOUR) % 24
    minutes = (total // SECONDS_PER_MINUTE) % 60
    seconds = total % 60
    return days, hours, minutes, seconds


def compact_duration(total: int) -> str:
    """Format seconds as ``D:HH:MM:SS``, ``HH:MM:SS``, ``MM:SS`` or ``SS``.

    Examples:
        >>> compact_duration(125)
        '02:05'
        >>> compact_duration(90065)
        '1:01:01:05'
    """
    days, hours, minutes, seconds = split_duration(total)

    if days > 0:
        return f"{days}:{hours:02}:{minutes:02}:{seconds:02}"
    if hours > 0:
        return f"{hours:02}:{minutes:02}:{seconds:02}"
    if minutes > 0:
        return f"{minutes:02}:{seconds:02}"
    return f"{seconds:02}"


def verbose_duration(total: int) -> str:
    """Format seconds as comma separated phrases, e.g. ``2 Minutes, 5 Seconds``."""
    days, hours, minutes, seconds = split_duration(total)
    parts = [
        (days, 'Days'),
        (hours, 'Hours'),
        (minutes, 'Minutes'),
        (seconds, 'Seconds'),
    ]

    # Drop leading zero units but always keep seconds
    while len(parts) > 1 and parts[0][0] == 0:
        parts.pop(0)

    return ", ".join(f"{value} {unit}" for value, unit in parts)
