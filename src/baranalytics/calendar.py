"""NYSE trading calendar and bar-period snapping.

No external dependencies; holiday rules are hardcoded for NYSE.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from baranalytics.models.bar import BarSize


def _observed(d: date) -> date:
    """Saturday holidays are observed Friday, Sunday holidays Monday."""
    if d.weekday() == 5:
        return d - timedelta(days=1)
    if d.weekday() == 6:
        return d + timedelta(days=1)
    return d


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """The nth occurrence of a weekday in a month (1-indexed)."""
    first = date(year, month, 1)
    delta = (weekday - first.weekday()) % 7
    return first + timedelta(days=delta, weeks=n - 1)


def _last_weekday(year: int, month: int, weekday: int) -> date:
    if month == 12:
        last_day = date(year, 12, 31)
    else:
        last_day = date(year, month + 1, 1) - timedelta(days=1)
    return last_day - timedelta(days=(last_day.weekday() - weekday) % 7)


def _good_friday(year: int) -> date:
    """Good Friday (anonymous Gregorian Easter algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day) - timedelta(days=2)


def _nyse_holidays(year: int) -> set[date]:
    holidays = {
        _nth_weekday(year, 1, 0, 3),   # MLK day
        _nth_weekday(year, 2, 0, 3),   # Presidents day
        _good_friday(year),
        _last_weekday(year, 5, 0),     # Memorial day
        _observed(date(year, 7, 4)),
        _nth_weekday(year, 9, 0, 1),   # Labor day
        _nth_weekday(year, 11, 3, 4),  # Thanksgiving
        _observed(date(year, 12, 25)),
    }
    # New Year's Day on a Saturday is not observed on the prior Friday
    new_years = date(year, 1, 1)
    if new_years.weekday() != 5:
        holidays.add(_observed(new_years))
    if year >= 2022:
        holidays.add(_observed(date(year, 6, 19)))
    return holidays


# ---- Public API ----

def is_holiday(d: date) -> bool:
    """Check if a date is an NYSE holiday."""
    return d in _nyse_holidays(d.year)


def is_trading_day(d: date) -> bool:
    """Check if a date is a trading day (weekday and not a holiday)."""
    return d.weekday() < 5 and not is_holiday(d)


def _first_trading_day_from(d: date) -> date:
    while not is_trading_day(d):
        d += timedelta(days=1)
    return d


def first_trading_day_of_week(d: date) -> date:
    """First trading day of the Monday-to-Sunday week containing ``d``."""
    return _first_trading_day_from(d - timedelta(days=d.weekday()))


def first_trading_day_of_month(d: date) -> date:
    return _first_trading_day_from(d.replace(day=1))


def first_trading_day_of_quarter(d: date) -> date:
    month = 3 * ((d.month - 1) // 3) + 1
    return _first_trading_day_from(date(d.year, month, 1))


def snap_to_bar_size(when: date | datetime, bar_size: BarSize) -> date:
    """Move a date to the first trading day of its ``bar_size`` period.

    Daily dates are returned unchanged.
    """
    d = when.date() if isinstance(when, datetime) else when
    if bar_size is BarSize.WEEKLY:
        return first_trading_day_of_week(d)
    if bar_size is BarSize.MONTHLY:
        return first_trading_day_of_month(d)
    if bar_size is BarSize.QUARTERLY:
        return first_trading_day_of_quarter(d)
    return d
