"""Local wall-clock helpers: zone lookup, gap handling and day boundaries."""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import resolve_imaginary

from calstep.errors import UnknownTimezone


def zone(tz: str | tzinfo | None) -> tzinfo | None:
    """Resolve an IANA name to a ZoneInfo; tzinfo instances and None pass through.

    Raises:
        UnknownTimezone: If ``tz`` is a name no zone is registered under
    """
    if tz is None or isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        raise UnknownTimezone(tz) from None


def normalize(dt: datetime) -> datetime:
    """Move a wall-clock time skipped by a DST transition forward past the gap.

    Naive datetimes and times that exist are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return resolve_imaginary(dt)


def beginning_of_date(day: date, tz: str | tzinfo | None = None) -> datetime:
    """
    Return local midnight (00:00:00) of a calendar date.

    Args:
        day: The calendar date (a datetime's time of day is ignored)
        tz: IANA timezone name or tzinfo; None gives a naive local time

    Returns:
        Datetime at the start of ``day``. In zones where midnight itself
        falls inside a DST gap, the first existing instant of the day.

    Example:
        >>> beginning_of_date(date(2025, 3, 9), tz="US/Pacific")
        datetime.datetime(2025, 3, 9, 0, 0, tzinfo=zoneinfo.ZoneInfo(key='US/Pacific'))
    """
    return normalize(datetime(day.year, day.month, day.day, tzinfo=zone(tz)))


def end_of_date(day: date, tz: str | tzinfo | None = None) -> datetime:
    """Return local 23:59:59 of a calendar date."""
    return normalize(
        datetime(day.year, day.month, day.day, 23, 59, 59, tzinfo=zone(tz))
    )
