"""Calendar units that a TimeWrapper can step by or truncate to."""

from enum import Enum

from calstep.errors import UnknownUnit


class Unit(str, Enum):
    YEAR = "year"
    MONTH = "month"
    WEEKDAY = "weekday"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @classmethod
    def coerce(cls, value: "Unit | str") -> "Unit":
        """Resolve a Unit, its name or a short alias ("wday", "min", "sec").

        Raises:
            UnknownUnit: If ``value`` names no unit
        """
        if isinstance(value, Unit):
            return value
        valid = [unit.value for unit in cls]
        if not isinstance(value, str):
            raise UnknownUnit(value, valid)
        key = value.lower()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise UnknownUnit(value, valid) from None

    @property
    def stepping(self) -> "Unit":
        """The unit actually stepped or cleared; a weekday moves by whole days."""
        return Unit.DAY if self is Unit.WEEKDAY else self


_ALIASES: dict[str, str] = {
    "wday": "weekday",
    "min": "minute",
    "sec": "second",
}

# Finest to coarsest; clear_below(unit) clears every entry before ``unit``
CLEAR_ORDER: tuple[Unit, ...] = (
    Unit.SECOND,
    Unit.MINUTE,
    Unit.HOUR,
    Unit.DAY,
    Unit.MONTH,
    Unit.YEAR,
)


def finer_than(unit: Unit) -> tuple[Unit, ...]:
    """Units strictly finer than ``unit``, finest first."""
    return CLEAR_ORDER[: CLEAR_ORDER.index(unit.stepping)]
