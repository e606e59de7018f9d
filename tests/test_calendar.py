"""Tests for trading calendar."""

from datetime import date, datetime

from baranalytics.calendar import (
    first_trading_day_of_month,
    first_trading_day_of_quarter,
    first_trading_day_of_week,
    is_holiday,
    is_trading_day,
    snap_to_bar_size,
)
from baranalytics.models.bar import BarSize


class TestIsHoliday:
    def test_new_years(self):
        assert is_holiday(date(2024, 1, 1))

    def test_mlk_day(self):
        assert is_holiday(date(2024, 1, 15))  # 3rd Monday of Jan 2024

    def test_good_friday(self):
        assert is_holiday(date(2024, 3, 29))

    def test_memorial_day(self):
        assert is_holiday(date(2024, 5, 27))

    def test_juneteenth(self):
        assert is_holiday(date(2024, 6, 19))

    def test_juneteenth_not_before_2022(self):
        assert not is_holiday(date(2021, 6, 19))

    def test_labor_day(self):
        assert is_holiday(date(2024, 9, 2))

    def test_thanksgiving(self):
        assert is_holiday(date(2024, 11, 28))

    def test_holiday_on_sunday_observed_monday(self):
        # 2023-01-01 is Sunday -> observed 2023-01-02
        assert is_holiday(date(2023, 1, 2))

    def test_independence_day_saturday_observed_friday(self):
        # 2020-07-04 is Saturday -> observed 2020-07-03
        assert is_holiday(date(2020, 7, 3))

    def test_new_years_saturday_not_moved_to_friday(self):
        # 2022-01-01 is Saturday; 2021-12-31 stays a trading day
        assert not is_holiday(date(2021, 12, 31))

    def test_regular_day_not_holiday(self):
        assert not is_holiday(date(2024, 1, 16))


class TestIsTradingDay:
    def test_weekday_no_holiday(self):
        assert is_trading_day(date(2024, 1, 16))

    def test_weekend(self):
        assert not is_trading_day(date(2024, 1, 13))
        assert not is_trading_day(date(2024, 1, 14))

    def test_holiday(self):
        assert not is_trading_day(date(2024, 1, 1))


class TestFirstTradingDay:
    def test_week_starting_on_holiday(self):
        # Week of MLK day: Monday closed, Tuesday opens the week
        assert first_trading_day_of_week(date(2024, 1, 18)) == date(2024, 1, 16)

    def test_week_regular(self):
        assert first_trading_day_of_week(date(2024, 1, 26)) == date(2024, 1, 22)

    def test_week_from_sunday(self):
        assert first_trading_day_of_week(date(2024, 1, 28)) == date(2024, 1, 22)

    def test_month_skips_new_years(self):
        assert first_trading_day_of_month(date(2024, 1, 20)) == date(2024, 1, 2)

    def test_month_skips_weekend(self):
        # 2024-06-01 is a Saturday
        assert first_trading_day_of_month(date(2024, 6, 14)) == date(2024, 6, 3)

    def test_quarter(self):
        assert first_trading_day_of_quarter(date(2024, 5, 15)) == date(2024, 4, 1)
        assert first_trading_day_of_quarter(date(2024, 12, 31)) == date(2024, 10, 1)


class TestSnapToBarSize:
    def test_daily_unchanged(self):
        assert snap_to_bar_size(date(2024, 1, 18), BarSize.DAILY) == date(2024, 1, 18)

    def test_accepts_datetime(self):
        snapped = snap_to_bar_size(datetime(2024, 1, 18, 15, 30), BarSize.WEEKLY)
        assert snapped == date(2024, 1, 16)

    def test_monthly_and_quarterly(self):
        assert snap_to_bar_size(date(2024, 2, 20), BarSize.MONTHLY) == date(2024, 2, 1)
        assert snap_to_bar_size(date(2024, 2, 20), BarSize.QUARTERLY) == date(2024, 1, 2)
