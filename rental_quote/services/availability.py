"""Day classification and range bookability.

Precedence for a single day, highest first:

1. ``is_always_available`` on the state (every day is available)
2. the day is listed in ``unavailable_dates``
3. a covering ``rented`` period
4. a covering ``pending`` period
5. a covering ``unavailable`` period
6. a covering ``available`` period
7. no covering period at all (not bookable)

Periods are matched on closed intervals and are not assumed to be sorted or
disjoint. An ``available`` period that excludes weekends does not cover
Saturdays and Sundays; protective periods always do.
"""

from datetime import date
from typing import Iterable, List, Optional, Tuple

from rental_quote.core.exceptions import DateConflictException, InvalidRangeException
from rental_quote.core.utils import is_weekend, iter_days
from rental_quote.schemas import (
    AvailabilityPeriod,
    AvailabilityState,
    AvailabilityStatus,
    BookingCheck,
    CalendarDay,
    RejectionReason,
    RentalRange,
)

_PROTECTIVE = (
    (AvailabilityStatus.RENTED, RejectionReason.DATE_ALREADY_RENTED),
    (AvailabilityStatus.PENDING, RejectionReason.DATE_ALREADY_PENDING),
    (AvailabilityStatus.UNAVAILABLE, RejectionReason.DATE_MARKED_UNAVAILABLE),
)


def _covers(period: AvailabilityPeriod, day: date) -> bool:
    if not period.start_date <= day <= period.end_date:
        return False
    if (
        period.status is AvailabilityStatus.AVAILABLE
        and not period.include_weekends
        and is_weekend(day)
    ):
        return False
    return True


def _overlapping(
    periods: Iterable[AvailabilityPeriod], start: date, end: date
) -> List[AvailabilityPeriod]:
    return [p for p in periods if p.start_date <= end and p.end_date >= start]


def _resolve(
    state: AvailabilityState, periods: Iterable[AvailabilityPeriod], day: date
) -> Tuple[AvailabilityStatus, Optional[RejectionReason]]:
    if state.is_always_available:
        return AvailabilityStatus.AVAILABLE, None

    if day in state.unavailable_dates:
        return AvailabilityStatus.UNAVAILABLE, RejectionReason.DATE_EXPLICITLY_BLOCKED

    covering = {p.status for p in periods if _covers(p, day)}
    for status, reason in _PROTECTIVE:
        if status in covering:
            return status, reason

    if AvailabilityStatus.AVAILABLE in covering:
        return AvailabilityStatus.AVAILABLE, None

    return (
        AvailabilityStatus.UNAVAILABLE,
        RejectionReason.DATE_HAS_NO_AVAILABILITY_RECORD,
    )


def resolve_day(
    state: AvailabilityState, day: date
) -> Tuple[AvailabilityStatus, Optional[RejectionReason]]:
    """Return the display status of ``day`` and, if it cannot be booked, why."""
    return _resolve(state, state.periods, day)


def classify_day(state: AvailabilityState, day: date) -> AvailabilityStatus:
    return resolve_day(state, day)[0]


def _validate_window(start: date, end: date) -> None:
    if end < start:
        raise InvalidRangeException(f"end_date {end} is before start_date {start}")


def ensure_bookable(state: AvailabilityState, rental_range: RentalRange) -> None:
    """Raise DateConflictException for the earliest day that is not available."""
    start, end = rental_range.start_date, rental_range.end_date
    _validate_window(start, end)

    if state.is_always_available:
        return

    periods = _overlapping(state.periods, start, end)
    for day in iter_days(start, end):
        _, reason = _resolve(state, periods, day)
        if reason is not None:
            raise DateConflictException(reason, day)


def check_range(state: AvailabilityState, rental_range: RentalRange) -> BookingCheck:
    try:
        ensure_bookable(state, rental_range)
    except DateConflictException as e:
        return BookingCheck(bookable=False, reason=e.reason, day=e.day)
    return BookingCheck(bookable=True)


def calendar(state: AvailabilityState, start: date, end: date) -> List[CalendarDay]:
    _validate_window(start, end)

    periods = _overlapping(state.periods, start, end)
    return [
        CalendarDay(day=day, status=_resolve(state, periods, day)[0])
        for day in iter_days(start, end)
    ]
