# File: utils/dt_utils.py
"""Date and time utilities for QuestKeeper.

Pure date/time functions. Nothing here reads the system clock except
``dt_now_utc``, which only the data builders use for creation timestamps;
engines always receive ``now`` from the caller.

Functions:
    - get_timezone: Resolve an IANA name to ZoneInfo
    - as_utc / as_local: Timezone conversion (naive input treated as UTC)
    - local_date: Calendar date of a moment in the configured zone
    - dt_parse: Normalize str/date/datetime inputs to aware datetimes
    - dt_parse_date: Parse ISO (or common) date strings
    - dt_to_iso: ISO 8601 serialization
    - start_of_week: First day of the calendar week containing a date
"""

from __future__ import annotations

from datetime import UTC, date, datetime
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Third-party date utilities
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# Default timezone - callers pass an explicit zone to override
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

_WEEKDAYS = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
}


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def get_timezone(name: str | None) -> ZoneInfo:
    """Resolve an IANA timezone name.

    Args:
        name: Timezone name such as "Europe/Warsaw", or None for the default

    Returns:
        ZoneInfo for the name

    Raises:
        ValueError: If the name is not a known timezone
    """
    if not name:
        return DEFAULT_TIME_ZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise ValueError(f"Unknown timezone: {name}") from err


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware).

    Returns:
        Current UTC datetime.
    """
    return datetime.now(UTC)


# ==============================================================================
# Timezone Conversion
# ==============================================================================


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC. Naive input is assumed to be UTC."""
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(UTC)


def as_local(dt_obj: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Convert a datetime to local timezone.

    Args:
        dt_obj: Datetime object (naive values are treated as UTC)
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Datetime in local timezone
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(tz_info)


def local_date(dt_obj: datetime, tz: ZoneInfo | None = None) -> date:
    """Return the calendar date of ``dt_obj`` in the local timezone."""
    return as_local(dt_obj, tz).date()


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse_date(date_str: str | None) -> date | None:
    """Safely parse a date string into a `datetime.date`.

    Accepts formats:
    - "2025-04-07" (ISO format)
    - "2025-04-07T10:00:00+00:00" (ISO datetime, date part kept)
    - "04/07/2025" (US format)
    - "2025/04/07"

    Args:
        date_str: Date string to parse, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if not date_str or not isinstance(date_str, str):
        return None

    try:
        return date.fromisoformat(date_str[:10])
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    _LOGGER.debug("Unparseable date string: %s", date_str)
    return None


def dt_parse(
    dt_input: str | date | datetime | None,
    default_tzinfo: ZoneInfo | None = None,
) -> datetime | None:
    """Normalize various datetime input formats to an aware datetime.

    Args:
        dt_input: String, date or datetime to normalize, or None
        default_tzinfo: Timezone to use if the input is naive
                        (defaults to UTC)

    Returns:
        Timezone-aware datetime, or None if the input could not be parsed.

    Example:
        >>> dt_parse("2025-04-15")
        datetime.datetime(2025, 4, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if not dt_input:
        return None

    tz_info = default_tzinfo or UTC
    result: datetime | None = None

    if isinstance(dt_input, str):
        try:
            result = datetime.fromisoformat(dt_input)
        except ValueError:
            parsed_date = dt_parse_date(dt_input)
            if parsed_date is None:
                return None
            result = datetime.combine(parsed_date, datetime.min.time())
    elif isinstance(dt_input, datetime):
        result = dt_input
    elif isinstance(dt_input, date):
        result = datetime.combine(dt_input, datetime.min.time())
    else:
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=tz_info)
    return result


# ==============================================================================
# Formatting
# ==============================================================================


def dt_to_iso(dt_obj: datetime) -> str:
    """Serialize an aware datetime to ISO 8601 in UTC."""
    return as_utc(dt_obj).isoformat()


# ==============================================================================
# Calendar Arithmetic
# ==============================================================================


def start_of_week(day: date, week_start: str = "monday") -> date:
    """Return the first day of the calendar week containing ``day``.

    Args:
        day: Any date
        week_start: Lowercase weekday name the week begins on

    Returns:
        The most recent ``week_start`` weekday on or before ``day``

    Example:
        start_of_week(date(2026, 10, 21), "monday") → date(2026, 10, 19)
    """
    weekday = _WEEKDAYS.get(week_start.lower())
    if weekday is None:
        raise ValueError(f"Unknown week start: {week_start}")
    return day + relativedelta(weekday=weekday(-1))
