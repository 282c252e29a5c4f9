import datetime

import pytest

from labworks.date import (
    MAX_DAYS,
    Date,
    Month,
    WeekDay,
    days_in_month,
    is_leap_year,
)

EPOCH = datetime.date(1970, 1, 1)


def test_create_default_and_from_timestamp():
    date1 = Date()
    assert date1.year == 1970
    assert date1.month == Month.JANUARY
    assert date1.day == 1

    date2 = Date(31)
    assert date2.year == 1970
    assert date2.month == Month.FEBRUARY
    assert date2.day == 1


def test_create_from_dmy():
    date3 = Date.from_dmy(31, Month.MAY, 2025)
    assert date3.is_valid()
    assert date3.year == 2025
    assert date3.month == Month.MAY
    assert date3.day == 31
    assert date3.weekday == WeekDay.SATURDAY


def test_invalid_dates():
    assert not Date.from_dmy(13, 13, 2025).is_valid()
    assert not Date.from_dmy(45, Month.APRIL, 2025).is_valid()
    assert not Date(MAX_DAYS + 1).is_valid()
    assert not Date.from_dmy(31, Month.DECEMBER, 1969).is_valid()
    assert not Date.from_dmy(1, Month.JANUARY, 10000).is_valid()


def test_leap_years():
    date1 = Date.from_dmy(29, Month.FEBRUARY, 2004)
    assert date1.is_valid()
    assert (date1.year, date1.month, date1.day) == (2004, Month.FEBRUARY, 29)

    assert not Date.from_dmy(29, Month.FEBRUARY, 2100).is_valid()

    date3 = Date.from_dmy(28, Month.FEBRUARY, 2016)
    date3 += 1
    assert (date3.year, date3.month, date3.day) == (2016, Month.FEBRUARY, 29)


def test_leap_year_rules():
    assert is_leap_year(2004)
    assert is_leap_year(2000)
    assert not is_leap_year(2100)
    assert days_in_month(Month.FEBRUARY, 2004) == 29
    assert days_in_month(Month.JANUARY, 2025) == 31


def test_compare():
    date1 = Date.from_dmy(23, Month.APRIL, 2001)
    date2 = Date.from_dmy(23, Month.APRIL, 2001)
    date3 = Date.from_dmy(3, Month.MARCH, 2001)
    assert date1 == date2
    assert date1 != date3
    assert date1 <= date2
    assert date1 >= date2
    assert date1 > date3
    assert date3 < date2
    assert date1 >= date3
    assert date3 <= date2
    assert hash(date1) == hash(date2)


def test_arithmetic():
    date1 = Date()
    date2 = date1 + 2
    assert date2.day == 3
    date2 += 1
    assert date2.day == 4
    date2 -= 2
    assert date2.day == 2
    date2 -= 1
    assert date1 == date2
    date1 += 32
    assert date1.month == Month.FEBRUARY
    assert date1 - date2 == 32
    assert date2 - date1 == -32


def test_subtracting_past_epoch_is_invalid():
    assert not (Date() - 1).is_valid()
    assert not (Date() + -1).is_valid()
    date = Date(5)
    date -= 10
    assert not date.is_valid()


def test_invalid_date_stays_invalid():
    invalid = Date(MAX_DAYS + 1)
    assert not (invalid + 5).is_valid()
    assert not (invalid - 5).is_valid()
    with pytest.raises(ValueError):
        invalid.day
    assert str(invalid) == "INVALID DATE"


def test_parse_and_format():
    date1 = Date.parse("12.4.2020")
    assert date1.is_valid()
    assert (date1.year, date1.month, date1.day) == (2020, Month.APRIL, 12)
    assert str(date1) == "12.04.2020"
    assert str(Date()) == "01.01.1970"


def test_parse_any_separator():
    date = Date.parse("31/12/1999")
    assert (date.year, date.month, date.day) == (1999, Month.DECEMBER, 31)


def test_parse_incomplete_input_raises():
    with pytest.raises(ValueError):
        Date.parse("12.2020")


def test_parse_out_of_range_gives_invalid_date():
    assert not Date.parse("31.02.2020").is_valid()


@pytest.mark.parametrize(
    "timestamp", [0, 59, 365, 789, 1095, 1460, 2556, 10956, 11016, 47540, 2932896]
)
def test_matches_gregorian_calendar(timestamp):
    expected = EPOCH + datetime.timedelta(days=timestamp)
    date = Date(timestamp)
    assert (date.year, date.month, date.day) == (
        expected.year,
        expected.month,
        expected.day,
    )
    assert Date.from_dmy(expected.day, Month(expected.month), expected.year) == date
    assert date.weekday == WeekDay(expected.isoweekday() % 7)
    assert str(Date.parse(str(date))) == str(date)