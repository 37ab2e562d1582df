import logging
from datetime import date, datetime, timedelta
from typing import Iterator, TypeVar

from calendar_math.core.timing import log_timing
from calendar_math.enums import Weekday
from calendar_math.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)

MIN_OCCURRENCE = 1
MAX_OCCURRENCE = 5


def _truncate(value: D) -> D:
    """Drop the time of day from datetimes, plain dates are returned as is."""
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)  # type: ignore
    return value


def _as_type_of(value: date, reference: D) -> D:
    if isinstance(reference, datetime):
        if isinstance(value, datetime):
            return _truncate(value)  # type: ignore
        return datetime(  # type: ignore
            value.year, value.month, value.day, tzinfo=reference.tzinfo
        )
    if isinstance(value, datetime):
        return value.date()  # type: ignore
    return value  # type: ignore


def _week_offset(value: date, week_start: Weekday) -> int:
    return (7 + (Weekday.of(value) - week_start)) % 7


def _first_day_of_week(value: D, week_start: Weekday) -> D:
    return _truncate(value - timedelta(days=_week_offset(value, week_start)))


def start_of_week(value: D, start_of_week: Weekday = Weekday.SUNDAY) -> D:
    """
    Get the first day of the week containing the passed date.

    Args:
        value: Date (or datetime) within the week
        start_of_week: Weekday the week begins on

    Returns:
        First day of the week, time of day truncated
    """
    return _first_day_of_week(value, start_of_week)


def end_of_week(value: D, start_of_week: Weekday = Weekday.SUNDAY) -> D:
    """Get the last day of the week containing the passed date."""
    diff = _week_offset(value, start_of_week)
    return _truncate(value + timedelta(days=6 - diff))


def week_range(value: D, start_of_week: Weekday = Weekday.SUNDAY) -> tuple[D, D]:
    """
    Get the start and end dates of the week containing value (inclusive range).
    """
    return (
        _first_day_of_week(value, start_of_week),
        end_of_week(value, start_of_week),
    )


def _validate_occurrence(occurrence: int) -> None:
    if not MIN_OCCURRENCE <= occurrence <= MAX_OCCURRENCE:
        raise InvalidArgumentError(
            f"occurrence must be between {MIN_OCCURRENCE} and {MAX_OCCURRENCE}, "
            f"got {occurrence}"
        )


def nth_weekday_of_month(
    year: int, month: int, weekday: Weekday, occurrence: int
) -> date | None:
    """
    Find the date of the nth occurrence of a weekday in a month.

    Args:
        year: The year
        month: The month (1-12)
        weekday: The weekday to look for
        occurrence: 1 for the first occurrence, 2 for the second, ... (1-5)

    Returns:
        The date or None if the month does not contain that many occurrences

    Raises:
        InvalidArgumentError: If occurrence is not between 1 and 5
    """
    _validate_occurrence(occurrence)

    first_day = date(year, month, 1)
    offset = (weekday - Weekday.of(first_day) + 7) % 7
    # Day of month, checked before building the date so December 9999 works
    day = 1 + offset + 7 * (occurrence - 1)

    if day > days_in_month(year, month):
        logger.debug(
            "No occurrence %s of %s in %s-%02d",
            occurrence,
            Weekday(weekday).name,
            year,
            month,
        )
        return None

    return first_day.replace(day=day)


def nth_weekday_of_month_from_date(
    value: D, weekday: Weekday, occurrence: int
) -> D | None:
    """
    Same as nth_weekday_of_month but the year and month are taken from value.
    A datetime passed in gives a datetime at midnight back.
    """
    result = nth_weekday_of_month(value.year, value.month, weekday, occurrence)
    if result is None:
        return None
    return _as_type_of(result, value)


def date_range(start: D, end: date) -> Iterator[D]:
    """
    Generate all dates between start and end (inclusive).

    The range is descending if end lies before start. If only one of the two
    is a datetime, end is converted to the type of start.
    """
    current = _truncate(start)
    stop = _as_type_of(end, start)

    # Whole calendar days, aware datetimes are not converted to UTC
    n_days = stop.toordinal() - current.toordinal()
    step = 1 if n_days >= 0 else -1

    for i in range(abs(n_days) + 1):
        yield current + timedelta(days=i * step)


def date_range_days(start: D, number_of_days: int) -> Iterator[D]:
    """
    Generate abs(number_of_days) dates beginning with start.

    Negative values walk backwards in time, zero yields nothing.
    """
    current = _truncate(start)
    step = 1 if number_of_days >= 0 else -1

    for i in range(abs(number_of_days)):
        yield current + timedelta(days=i * step)


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31

    last_day = date(year, month + 1, 1) - timedelta(days=1)
    return last_day.day


def dates_in_month(year: int, month: int) -> Iterator[date]:
    """
    Generate all dates for a given month.

    Args:
        year: The year
        month: The month (1-12)
    """
    first_day = date(year, month, 1)
    last_day = date(year, month, days_in_month(year, month))

    return date_range(first_day, last_day)


@log_timing
def month_grid(
    year: int, month: int, start_of_week: Weekday = Weekday.SUNDAY
) -> list[list[date]]:
    """
    Lay out a month as full weeks for a calendar view. Days of the previous
    and next month are used to pad the first and last week.
    """
    first_day = date(year, month, 1)
    last_day = date(year, month, days_in_month(year, month))

    days = list(
        date_range(
            _first_day_of_week(first_day, start_of_week),
            end_of_week(last_day, start_of_week),
        )
    )

    return [days[i : i + 7] for i in range(0, len(days), 7)]
