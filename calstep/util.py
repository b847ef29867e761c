"""Seconds in each fixed-length unit TimeWrapper steps and clears by.

Months and years have no fixed length; they are turned into day counts by
:mod:`calstep.gregorian` and then scaled by ``DAY``.
"""

SECOND = 1
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
