from loguru import logger

from .errors import (
    CalstepError,
    UnknownMonth,
    UnknownTimezone,
    UnknownUnit,
    UnknownWeekday,
)
from .gregorian import (
    COMMON_YEAR_MONTH_DAYS,
    DAYS,
    LEAP_YEAR_MONTH_DAYS,
    MONTHS,
    days_before_month,
    days_in_month,
    days_in_n_months,
    days_in_n_years,
    days_in_year,
    is_leap,
    symbol_to_day,
    symbol_to_month,
    wday,
    which_occurrence_in_month,
)
from .localtime import beginning_of_date, end_of_date
from .units import Unit
from .util import DAY, HOUR, MINUTE, SECOND
from .wrapper import TimeWrapper

# Silent unless the application opts in with logger.enable("calstep")
logger.disable(__name__)

__all__ = [
    "TimeWrapper",
    "Unit",
    "beginning_of_date",
    "end_of_date",
    "is_leap",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "days_in_n_years",
    "days_in_n_months",
    "wday",
    "which_occurrence_in_month",
    "symbol_to_month",
    "symbol_to_day",
    "DAYS",
    "MONTHS",
    "LEAP_YEAR_MONTH_DAYS",
    "COMMON_YEAR_MONTH_DAYS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "CalstepError",
    "UnknownMonth",
    "UnknownWeekday",
    "UnknownUnit",
    "UnknownTimezone",
]
