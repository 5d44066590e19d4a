"""
Timestamp utility functions.

Converts seconds-based timestamps to the textual forms used by the
subtitle formats (SRT, WebVTT, CSV, TXT) and back again.
"""

import math
from typing import Literal, NamedTuple, Optional

from transcript_pro.utils.error_handling import InvalidTimestamp
from transcript_pro.utils.logger import logging

CSVTimestampStyle = Literal["seconds", "hms", "hms-millis"]


class TimestampParseResult(NamedTuple):
    """Outcome of parsing a timestamp string: either seconds or an error."""

    seconds: Optional[float]
    error: Optional[InvalidTimestamp] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the parsed seconds, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.seconds


def format_clock(seconds: float, separator: str = ".", include_millis: bool = True) -> str:
    """
    Format seconds as ``HH:MM:SS`` or ``HH:MM:SS<sep>mmm``.

    Hours are not capped and grow past two digits for very long videos.
    Milliseconds are rounded half-up; a value that rounds to 1000 carries
    into the seconds. Negative input is treated as zero.

    Args:
        seconds: Time in seconds (can be fractional)
        separator: Character placed between seconds and milliseconds
        include_millis: Whether to append the milliseconds part

    Returns:
        Formatted timestamp string
    """
    if seconds < 0:
        logging.debug(f"Negative timestamp {seconds}s clamped to 0")
        seconds = 0

    whole = math.floor(seconds)
    millis = math.floor((seconds % 1) * 1000 + 0.5)
    if millis >= 1000:
        whole += 1
        millis -= 1000

    hours, remainder = divmod(whole, 3600)
    minutes, secs = divmod(remainder, 60)

    clock = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if not include_millis:
        return clock
    return f"{clock}{separator}{millis:03d}"


def format_timestamp_srt(seconds: float) -> str:
    """SubRip timestamp, comma separated: ``00:01:23,456``."""
    return format_clock(seconds, ",", True)


def format_timestamp_vtt(seconds: float) -> str:
    """WebVTT timestamp, period separated: ``00:01:23.456``."""
    return format_clock(seconds, ".", True)


def format_timestamp_csv(seconds: float, style: CSVTimestampStyle = "hms-millis") -> str:
    """
    Format a timestamp for CSV and TXT exports.

    Args:
        seconds: Time in seconds
        style: 'seconds' (``83.456``), 'hms' (``00:01:23``) or
            'hms-millis' (``00:01:23.456``)

    Returns:
        Formatted timestamp string
    """
    if style == "seconds":
        return f"{seconds:.3f}"
    if style == "hms":
        return format_clock(seconds, "", False)
    return format_clock(seconds, ".", True)


def parse_timestamp(timestamp: str) -> TimestampParseResult:
    """
    Parse ``HH:MM:SS``, ``HH:MM:SS.mmm`` or ``HH:MM:SS,mmm`` into seconds.

    The hours component has no upper bound. Failures are returned as the
    ``error`` of the result instead of being raised.

    Args:
        timestamp: Formatted timestamp

    Returns:
        TimestampParseResult with the seconds or an InvalidTimestamp error
    """
    parts = timestamp.strip().replace(",", ".").split(":")
    if len(parts) != 3:
        return TimestampParseResult(None, InvalidTimestamp(timestamp, "expected HH:MM:SS"))

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        secs = float(parts[2])
    except ValueError:
        return TimestampParseResult(None, InvalidTimestamp(timestamp, "non-numeric component"))

    if hours < 0 or minutes < 0 or secs < 0 or not math.isfinite(secs):
        return TimestampParseResult(None, InvalidTimestamp(timestamp, "negative component"))
    if minutes > 59 or secs >= 60:
        return TimestampParseResult(None, InvalidTimestamp(timestamp, "minutes or seconds out of range"))

    return TimestampParseResult(hours * 3600 + minutes * 60 + secs)


def calculate_duration(start: float, end: float) -> float:
    """Duration between two timestamps, never negative."""
    return max(0.0, end - start)


def format_duration(seconds: float) -> str:
    """
    Format a duration as a human readable string.

    Examples: ``83 -> "1m 23s"``, ``3661 -> "1h 1m 1s"``, ``0.5 -> "0s"``.
    """
    total = max(0, math.floor(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
