"""Calendar utility and daylight saving time tests."""

import datetime

import pytest

from solar_alt_az.dates import (
    SUNDAY,
    check_date,
    check_time,
    day_of_week,
    day_of_year,
    days_in_months,
    is_dst,
    leap_year,
    local_tz_offset,
    nth_weekday_of_month,
)


class TestLeapYear:
    @pytest.mark.parametrize(
        "year,expected",
        [(2024, True), (2023, False), (2000, True), (1900, False), (2100, False)],
    )
    def test_rule(self, year, expected):
        assert leap_year(year) is expected

    def test_february_length(self):
        assert days_in_months(2024)[1] == 29
        assert days_in_months(2023)[1] == 28
        assert sum(days_in_months(2024)) == 366
        assert sum(days_in_months(2023)) == 365


class TestDayOfYear:
    def test_known_dates(self):
        assert day_of_year(2024, 1, 1) == 1
        assert day_of_year(2024, 12, 31) == 366
        assert day_of_year(2023, 12, 31) == 365
        assert day_of_year(2026, 3, 21) == 80

    def test_leap_year(self):
        assert day_of_year(2024, 2, 29) == 60
        assert day_of_year(2024, 3, 1) == 61

    def test_century_leap_year_rules(self):
        assert day_of_year(2000, 3, 1) == 61  # divisible by 400
        assert day_of_year(1900, 3, 1) == 60  # not leap (div by 100 not 400)

    def test_first_day_of_each_month_non_leap(self):
        expected = [1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335]
        for month, exp in enumerate(expected, 1):
            assert day_of_year(2026, month, 1) == exp, f"Month {month}"

    def test_matches_datetime(self):
        date = datetime.date(2024, 1, 1)
        while date.year == 2024:
            assert day_of_year(date.year, date.month, date.day) == date.timetuple().tm_yday
            date += datetime.timedelta(days=1)

    def test_out_of_range_day_does_not_raise(self):
        assert day_of_year(2025, 1, 40) == 40


class TestDayOfWeek:
    def test_matches_datetime(self):
        date = datetime.date(1999, 12, 1)
        end = datetime.date(2031, 1, 1)
        while date < end:
            assert day_of_week(date.year, date.month, date.day) == date.weekday(), date
            date += datetime.timedelta(days=13)

    def test_known_days(self):
        assert day_of_week(2025, 3, 9) == SUNDAY
        assert day_of_week(2025, 11, 2) == SUNDAY
        assert day_of_week(2000, 1, 1) == 5  # Saturday


class TestNthWeekdayOfMonth:
    @pytest.mark.parametrize(
        "year,march_second_sunday,november_first_sunday",
        [
            (2024, 10, 3),
            (2025, 9, 2),
            (2026, 8, 1),
            (2027, 14, 7),
        ],
    )
    def test_dst_transition_days(self, year, march_second_sunday, november_first_sunday):
        assert nth_weekday_of_month(year, 3, SUNDAY, 2) == march_second_sunday
        assert nth_weekday_of_month(year, 11, SUNDAY, 1) == november_first_sunday

    def test_result_is_requested_weekday(self):
        for month in range(1, 13):
            for weekday in range(7):
                d = nth_weekday_of_month(2025, month, weekday, 1)
                assert 1 <= d <= 7
                assert datetime.date(2025, month, d).weekday() == weekday


class TestIsDST:
    def test_spring_forward(self):
        assert is_dst(2025, 3, 9, 1) is False
        assert is_dst(2025, 3, 9, 2) is True
        assert is_dst(2025, 3, 9, 3) is True

    def test_fall_back(self):
        assert is_dst(2025, 11, 2, 1) is True
        assert is_dst(2025, 11, 2, 2) is False
        assert is_dst(2025, 11, 2, 3) is False

    def test_days_around_transitions(self):
        assert is_dst(2025, 3, 8, 23) is False
        assert is_dst(2025, 3, 10, 0) is True
        assert is_dst(2025, 11, 1, 23) is True
        assert is_dst(2025, 11, 3, 0) is False

    @pytest.mark.parametrize("month", [1, 2, 12])
    def test_winter_months(self, month):
        assert is_dst(2025, month, 15, 12) is False

    @pytest.mark.parametrize("month", range(4, 11))
    def test_summer_months(self, month):
        assert is_dst(2025, month, 15, 12) is True


class TestLocalTzOffset:
    def test_dst_adds_an_hour(self):
        assert local_tz_offset(-6, 2025, 7, 1, 12) == -5
        assert local_tz_offset(-6, 2025, 1, 1, 12) == -6

    def test_dst_not_observed(self):
        assert local_tz_offset(-7, 2025, 7, 1, 12, observe_dst=False) == -7


class TestValidation:
    def test_valid_date_passes(self):
        check_date(2024, 2, 29)
        check_time(23, 59, 59)

    @pytest.mark.parametrize(
        "year,month,day",
        [(2023, 2, 29), (2025, 13, 1), (2025, 0, 1), (2025, 4, 31), (2025, 1, 0), (0, 1, 1)],
    )
    def test_invalid_date(self, year, month, day):
        with pytest.raises(ValueError):
            check_date(year, month, day)

    @pytest.mark.parametrize(
        "hour,minute,second", [(24, 0, 0), (-1, 0, 0), (12, 60, 0), (12, 0, 60)]
    )
    def test_invalid_time(self, hour, minute, second):
        with pytest.raises(ValueError):
            check_time(hour, minute, second)
