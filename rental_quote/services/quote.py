from datetime import date
from typing import Any, List, Mapping, Union

from loguru import logger

from rental_quote.config.settings import Settings
from rental_quote.core.exceptions import InvalidRangeException, RentalQuoteException
from rental_quote.monitoring.metrics import MetricsCollector
from rental_quote.schemas import (
    AvailabilityState,
    BookingCheck,
    CalendarDay,
    PriceModel,
    QuoteRejection,
    RentalQuote,
    RentalRange,
)
from rental_quote.services import availability
from rental_quote.services.tiers import load_price_model, price_breakdown, rental_days


class RentalQuoteService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def load_price_model(
        self, data: Union[PriceModel, Mapping[str, Any]]
    ) -> Union[PriceModel, QuoteRejection]:
        try:
            return load_price_model(data, self.settings.default_currency)
        except RentalQuoteException as e:
            logger.warning(f"Rejected price model: {e.detail}")
            MetricsCollector.record_price_model_rejection()
            return e.to_rejection()

    def quote(
        self,
        price_model: PriceModel,
        availability_state: AvailabilityState,
        rental_range: RentalRange,
    ) -> Union[RentalQuote, QuoteRejection]:
        logger.info(
            f"Quoting rental {rental_range.start_date} .. {rental_range.end_date}"
        )

        try:
            days = self._validated_days(rental_range)
            availability.ensure_bookable(availability_state, rental_range)
            quote = price_breakdown(price_model, days)
        except RentalQuoteException as e:
            rejection = e.to_rejection()
            logger.warning(
                f"Quote rejected: reason={rejection.reason.value}, day={rejection.day}"
            )
            MetricsCollector.record_rejection(rejection.reason)
            return rejection

        MetricsCollector.record_quote(days)
        logger.info(
            f"Quoted {days} days at {quote.price_per_day.amount}/day, "
            f"total={quote.total.amount} {quote.total.currency}"
        )
        return quote

    def check_availability(
        self, availability_state: AvailabilityState, rental_range: RentalRange
    ) -> Union[BookingCheck, QuoteRejection]:
        try:
            self._validated_days(rental_range)
            check = availability.check_range(availability_state, rental_range)
        except RentalQuoteException as e:
            return e.to_rejection()

        MetricsCollector.record_availability_check(check.bookable)
        if not check.bookable:
            logger.debug(f"Range not bookable: {check.reason.value} at {check.day}")
        return check

    def calendar(
        self, availability_state: AvailabilityState, start: date, end: date
    ) -> Union[List[CalendarDay], QuoteRejection]:
        try:
            days = rental_days(RentalRange(start_date=start, end_date=end))
            if days > self.settings.max_calendar_days:
                raise InvalidRangeException(
                    f"calendar window of {days} days exceeds "
                    f"{self.settings.max_calendar_days}"
                )
            result = availability.calendar(availability_state, start, end)
        except RentalQuoteException as e:
            return e.to_rejection()

        MetricsCollector.record_calendar(len(result))
        return result

    def _validated_days(self, rental_range: RentalRange) -> int:
        days = rental_days(rental_range)
        if days > self.settings.max_rental_days:
            raise InvalidRangeException(
                f"rental of {days} days exceeds {self.settings.max_rental_days}"
            )
        return days
