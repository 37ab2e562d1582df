from datetime import date
from enum import IntEnum
from typing import Self

from calendar_math.errors import InvalidArgumentError


class Weekday(IntEnum):
    """Day of the week, counted from Sunday (0) to Saturday (6)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value: date) -> Self:
        # date.weekday() starts the week on Monday
        return cls((value.weekday() + 1) % 7)

    @classmethod
    def parse(cls, name: str) -> Self:
        """Accepts full ("Monday") or three letter ("mon") names, any case."""
        key = name.strip().lower()
        for member in cls:
            full_name = member.name.lower()
            if key == full_name or key == full_name[:3]:
                return member
        raise InvalidArgumentError(f"Unknown weekday name '{name}'")
