"""A small stateful wrapper for moving a local time around by calendar units.

Days, hours and minutes are applied as fixed multiples of seconds, while
months and years are first translated into day counts so that variable month
lengths and leap years come out right. Day, month and year steps happen on
the local wall clock of the wrapped datetime: adding a day across a DST
transition keeps the time of day, and a result that lands in a
spring-forward gap is moved forward past it. Hour, minute and second steps
move along the absolute timeline, so they walk through a repeated fall-back
hour instead of jumping over or back across it.
"""

from datetime import datetime, timedelta, timezone

from loguru import logger
from typing_extensions import assert_never

from calstep.gregorian import days_before_month, days_in_n_months, days_in_n_years
from calstep.localtime import normalize
from calstep.units import Unit, finer_than
from calstep.util import DAY, HOUR, MINUTE


class TimeWrapper:
    """Own a single datetime and step or truncate it by calendar units.

    Every operation replaces the owned value with a newly computed one and
    returns the wrapper, so calls can be chained:

        >>> start = datetime(2025, 1, 31, 14, 30)
        >>> TimeWrapper(start).add("month", 1).clear_below("day").to_value()
        datetime.datetime(2025, 2, 28, 0, 0)

    Instances are not locked; share one across threads only under the
    caller's own synchronization.
    """

    def __init__(self, time: datetime):
        if not isinstance(time, datetime):
            raise TypeError(
                f"TimeWrapper needs a datetime, got {type(time).__name__!r}: "
                f"{time!r}\n"
                f"Hint: use beginning_of_date(d) to turn a date into a datetime"
            )
        self._time: datetime = time

    def __repr__(self) -> str:
        return f"TimeWrapper({self._time!r})"

    def to_value(self) -> datetime:
        """Return the current wrapped time."""
        return self._time

    def add(self, unit: Unit | str, amount: int) -> "TimeWrapper":
        """
        Advance the wrapped time by ``amount`` units (negative moves back).

        Args:
            unit: Unit or unit name ("year", "month", "weekday", "day",
                "hour", "minute", "second"). A weekday step is a day step.
            amount: Signed number of units

        Returns:
            This wrapper

        Raises:
            UnknownUnit: If ``unit`` is not recognized (the time is unchanged)
        """
        unit = Unit.coerce(unit)
        delta = self._delta(unit.stepping, amount)
        if unit.stepping in _ELAPSED_UNITS:
            self._time = _elapsed(self._time, timedelta(seconds=delta))
        else:
            self._time = normalize(self._time + timedelta(seconds=delta))
        logger.bind(unit=unit.value, amount=amount, delta=delta).debug(
            "Advanced wrapped time to {}", self._time
        )
        return self

    def clear_below(self, unit: Unit | str) -> "TimeWrapper":
        """
        Reset every field finer than ``unit`` to its minimum.

        Fields are cleared finest first: second, minute, hour, day (to the
        1st), month (to January). ``clear_below("second")`` is a no-op and
        ``clear_below("year")`` truncates to January 1st, 00:00:00.

        Raises:
            UnknownUnit: If ``unit`` is not recognized (the time is unchanged)
        """
        unit = Unit.coerce(unit)
        time = self._time
        for finer in finer_than(unit):
            time = _cleared(time, finer)
        self._time = normalize(time)
        logger.bind(unit=unit.value).debug("Cleared wrapped time to {}", self._time)
        return self

    def _delta(self, unit: Unit, amount: int) -> int:
        """Seconds to add for ``amount`` steps of ``unit`` from the current time."""
        match unit:
            case Unit.YEAR:
                return days_in_n_years(self._time, amount) * DAY
            case Unit.MONTH:
                return days_in_n_months(self._time, amount) * DAY
            case Unit.DAY | Unit.WEEKDAY:
                return amount * DAY
            case Unit.HOUR:
                return amount * HOUR
            case Unit.MINUTE:
                return amount * MINUTE
            case Unit.SECOND:
                return amount
            case _:
                assert_never(unit)


# Units measured in elapsed time rather than on the wall clock
_ELAPSED_UNITS = (Unit.HOUR, Unit.MINUTE, Unit.SECOND)


def _elapsed(time: datetime, delta: timedelta) -> datetime:
    """Shift ``time`` by ``delta`` of real elapsed time, keeping its zone and fold."""
    if time.tzinfo is None:
        return time + delta
    return (time.astimezone(timezone.utc) + delta).astimezone(time.tzinfo)


def _cleared(time: datetime, unit: Unit) -> datetime:
    # Seconds and minutes are dropped in elapsed time so a repeated hour keeps
    # its fold; hours and coarser fields are reset on the wall clock
    match unit:
        case Unit.SECOND:
            return _elapsed(
                time, -timedelta(seconds=time.second, microseconds=time.microsecond)
            )
        case Unit.MINUTE:
            return _elapsed(time, -timedelta(seconds=time.minute * MINUTE))
        case Unit.HOUR:
            return time - timedelta(seconds=time.hour * HOUR)
        case Unit.DAY | Unit.WEEKDAY:
            return time - timedelta(seconds=(time.day - 1) * DAY)
        case Unit.MONTH:
            # Back to January 1st; the day has already been cleared to the 1st
            return time - timedelta(
                seconds=days_before_month(time.year, time.month) * DAY
            )
        case Unit.YEAR:
            return time
        case _:
            assert_never(unit)
