from calendar_math.date_utils import (
    date_range,
    date_range_days,
    dates_in_month,
    days_in_month,
    end_of_week,
    month_grid,
    nth_weekday_of_month,
    nth_weekday_of_month_from_date,
    start_of_week,
    week_range,
)
from calendar_math.enums import Weekday
from calendar_math.errors import InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "Weekday",
    "date_range",
    "date_range_days",
    "dates_in_month",
    "days_in_month",
    "end_of_week",
    "month_grid",
    "nth_weekday_of_month",
    "nth_weekday_of_month_from_date",
    "start_of_week",
    "week_range",
]
