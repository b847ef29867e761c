"""Exceptions raised by calstep.

Every error derives from :class:`CalstepError`, which is itself a
``ValueError`` so that generic input validation keeps catching them.
"""

from collections.abc import Iterable
from typing import Any


def _valid(names: Iterable[str]) -> str:
    return ", ".join(names)


class CalstepError(ValueError):
    """Base exception for all calstep errors."""


class UnknownMonth(CalstepError):
    """A month name outside the twelve known months."""

    def __init__(self, name: Any, valid: Iterable[str] = ()):
        self.name: Any = name
        super().__init__(
            f"No such month: {name!r}\n"
            f"Valid months: {_valid(valid)}\n"
            f"Example: symbol_to_month('february') == 2"
        )


class UnknownWeekday(CalstepError):
    """A weekday name outside the seven known days."""

    def __init__(self, name: Any, valid: Iterable[str] = ()):
        self.name: Any = name
        super().__init__(
            f"No such day: {name!r}\n"
            f"Valid days: {_valid(valid)}\n"
            f"Example: symbol_to_day('tuesday') == 2"
        )


class UnknownUnit(CalstepError):
    """A unit tag that add()/clear_below() cannot dispatch on."""

    def __init__(self, unit: Any, valid: Iterable[str] = ()):
        self.unit: Any = unit
        super().__init__(
            f"Unknown time unit: {unit!r}\n"
            f"Valid units: {_valid(valid)}\n"
            f"Example: wrapper.add('month', 1) or wrapper.clear_below(Unit.DAY)"
        )


class UnknownTimezone(CalstepError):
    """An IANA zone name that could not be loaded."""

    def __init__(self, name: str):
        self.name: str = name
        super().__init__(
            f"Unknown timezone: {name!r}\n"
            f"Hint: use an IANA name such as 'UTC', 'US/Pacific' or "
            f"'Europe/London', or pass a tzinfo instance"
        )
