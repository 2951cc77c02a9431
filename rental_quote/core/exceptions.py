from datetime import date
from typing import Optional

from fastapi import HTTPException

from rental_quote.schemas import QuoteRejection, RejectionReason


class RentalQuoteException(Exception):
    reason = RejectionReason.RANGE_NOT_FULLY_AVAILABLE

    def __init__(self, detail: str = "", day: Optional[date] = None):
        super().__init__(detail)
        self.detail = detail
        self.day = day

    def to_rejection(self) -> QuoteRejection:
        return QuoteRejection(reason=self.reason, day=self.day, detail=self.detail)


class InvalidRangeException(RentalQuoteException):
    reason = RejectionReason.INVALID_RANGE


class InvalidPriceModelException(RentalQuoteException):
    reason = RejectionReason.INVALID_PRICE_MODEL


class DateConflictException(RentalQuoteException):
    def __init__(self, reason: RejectionReason, day: date):
        super().__init__(f"{day.isoformat()} is not bookable: {reason.value}", day)
        self.reason = reason


def invalid_range_exception(rejection: QuoteRejection):
    return HTTPException(status_code=400, detail=rejection.model_dump(mode="json"))


def invalid_price_model_exception(rejection: QuoteRejection):
    return HTTPException(status_code=422, detail=rejection.model_dump(mode="json"))


def range_not_available_exception(rejection: QuoteRejection):
    return HTTPException(status_code=409, detail=rejection.model_dump(mode="json"))


def rejection_exception(rejection: QuoteRejection):
    if rejection.reason is RejectionReason.INVALID_RANGE:
        return invalid_range_exception(rejection)
    if rejection.reason is RejectionReason.INVALID_PRICE_MODEL:
        return invalid_price_model_exception(rejection)
    return range_not_available_exception(rejection)
