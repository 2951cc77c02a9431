from datetime import date, timedelta
from typing import Iterator


def day_count(start: date, end: date) -> int:
    return (end - start).days + 1


def iter_days(start: date, end: date) -> Iterator[date]:
    # never steps past `end`; `end` may be date.max
    for offset in range(day_count(start, end)):
        yield start + timedelta(days=offset)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
