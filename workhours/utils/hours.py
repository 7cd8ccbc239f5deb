"""Net working hours calculated from "HH:MM" strings."""
import math
from typing import Optional


def parse_minutes(value: str) -> float:
    """
    Convert an "HH:MM" string to minutes since midnight.

    Anything after the minutes (e.g. seconds) is ignored. Malformed input
    yields NaN rather than an error.

    Example:
        >>> parse_minutes("09:30")
        570.0
        >>> math.isnan(parse_minutes("nine"))
        True
    """
    parts = value.split(":")
    if len(parts) < 2:
        return math.nan
    try:
        hours = float(parts[0])
        minutes = float(parts[1])
    except ValueError:
        return math.nan
    return hours * 60 + minutes


def calculate_net_hours(
    start_time: str, end_time: str, break_minutes: Optional[float] = None
) -> float:
    """
    Net worked hours between two "HH:MM" times minus a break.

    Args:
        start_time: Shift start, "HH:MM"
        end_time: Shift end, "HH:MM"
        break_minutes: Break duration in minutes, absent means 0

    Returns:
        ((end - start) - break) / 60. Negative when end is before start.

    Example:
        >>> calculate_net_hours("09:00", "17:00", 30)
        7.5
    """
    total_minutes = parse_minutes(end_time) - parse_minutes(start_time)
    return (total_minutes - (break_minutes or 0)) / 60
