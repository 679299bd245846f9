"""
Time helpers for the Basketball Rotation Planner application.

This module contains the clock primitive and display formatting shared by
the services and both user interfaces.
"""
import time


def format_time(seconds: int) -> str:
    """
    Format seconds as an M:SS string.

    Minutes are not padded and never roll over into hours.

    Args:
        seconds: Number of seconds to format

    Returns:
        Formatted time string

    Example:
        >>> format_time(125)
        '2:05'
        >>> format_time(3661)
        '61:01'
    """
    seconds = int(seconds)
    m = seconds // 60
    s = seconds % 60
    return f"{m}:{s:02d}"


def now_ts() -> float:
    """
    Get the current reading of the monotonic clock.

    Returns:
        Seconds as a float, only meaningful relative to other readings
    """
    return time.monotonic()
