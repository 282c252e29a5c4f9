"""Calendar dates stored as a count of days since 1 January 1970."""

from __future__ import annotations

import re
from enum import IntEnum
from functools import total_ordering

MIN_YEAR = 1970
MAX_YEAR = 9999
MAX_DAYS = 2932897
INVALID_TIMESTAMP = MAX_DAYS + 1
INVALID_DATE_MSG = "INVALID DATE"
LEAP_YEAR_FEBRUARY_DAYS = 29

_UINT_RANGE = 2**32
_DAYS_IN_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_NUMBER = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR = re.compile(r"\s*(\S)")


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class WeekDay(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def is_leap_year(year):
    """Return True for leap years of the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month, year):
    """Return the number of days in the given month of the given year."""
    month = Month(month)
    if month is Month.FEBRUARY and is_leap_year(year):
        return LEAP_YEAR_FEBRUARY_DAYS
    return _DAYS_IN_MONTHS[month - 1]


def _days_from_civil(year, month, day):
    y = year - (month <= 2)
    era = y // 400
    year_of_era = y - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def _civil_from_days(days):
    z = days + 719468
    era = z // 146097
    day_of_era = z - era * 146097
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def _read_unsigned(text, pos):
    match = _NUMBER.match(text, pos)
    if match is None:
        raise ValueError(f"cannot parse date from {text!r}")
    value = int(match.group(1))
    if abs(value) >= _UINT_RANGE:
        raise ValueError(f"number out of range in {text!r}")
    return value % _UINT_RANGE, match.end()


def _skip_separator(text, pos):
    match = _SEPARATOR.match(text, pos)
    if match is None:
        raise ValueError(f"cannot parse date from {text!r}")
    return match.end()


@total_ordering
class Date:
    """A date between 1 January 1970 and the end of year 9999, or an invalid date."""

    __slots__ = ("_timestamp",)

    def __init__(self, timestamp=0):
        self._timestamp = int(timestamp) % _UINT_RANGE

    @classmethod
    def from_dmy(cls, day, month, year):
        """Build a date from day, month and year; out-of-range values give an invalid date."""
        if not (
            MIN_YEAR <= year <= MAX_YEAR
            and 1 <= int(month) <= 12
            and 1 <= day <= days_in_month(month, year)
        ):
            return cls(INVALID_TIMESTAMP)
        return cls(_days_from_civil(year, int(month), day))

    @classmethod
    def parse(cls, text):
        """Parse "day<sep>month<sep>year", where each separator is any single character."""
        day, pos = _read_unsigned(text, 0)
        pos = _skip_separator(text, pos)
        month, pos = _read_unsigned(text, pos)
        pos = _skip_separator(text, pos)
        year, _ = _read_unsigned(text, pos)
        return cls.from_dmy(day, month, year)

    @property
    def timestamp(self):
        return self._timestamp

    def _require_valid(self):
        if not self.is_valid():
            raise ValueError(INVALID_DATE_MSG)

    @property
    def day(self):
        self._require_valid()
        return _civil_from_days(self._timestamp)[2]

    @property
    def month(self):
        self._require_valid()
        return Month(_civil_from_days(self._timestamp)[1])

    @property
    def year(self):
        self._require_valid()
        return _civil_from_days(self._timestamp)[0]

    @property
    def weekday(self):
        return WeekDay((self._timestamp + 4) % 7)

    def is_valid(self):
        return self._timestamp <= MAX_DAYS

    def __add__(self, days):
        if not isinstance(days, int):
            return NotImplemented
        if self.is_valid():
            return Date(self._timestamp + days)
        return Date(INVALID_TIMESTAMP)

    def __sub__(self, other):
        if isinstance(other, Date):
            return self._timestamp - other._timestamp
        if not isinstance(other, int):
            return NotImplemented
        if self.is_valid() and self._timestamp >= other:
            return Date(self._timestamp - other)
        return Date(INVALID_TIMESTAMP)

    def __iadd__(self, days):
        if not isinstance(days, int):
            return NotImplemented
        if self.is_valid():
            return Date(self._timestamp + days)
        return self

    def __isub__(self, days):
        if not isinstance(days, int):
            return NotImplemented
        return self - days

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._timestamp == other._timestamp

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._timestamp < other._timestamp

    def __hash__(self):
        return hash(self._timestamp)

    def __repr__(self):
        return f"Date({self._timestamp})"

    def __str__(self):
        if not self.is_valid():
            return INVALID_DATE_MSG
        year, month, day = _civil_from_days(self._timestamp)
        return f"{day:02d}.{month:02d}.{year}"