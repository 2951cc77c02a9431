from fastapi import APIRouter, Depends

from rental_quote.api.dependencies import get_quote_service
from rental_quote.core.exceptions import rejection_exception
from rental_quote.schemas import (
    AvailabilityRequest,
    BookingCheck,
    CalendarResponse,
    QuoteRejection,
    QuoteRequest,
    RentalQuote,
)
from rental_quote.services.quote import RentalQuoteService

router = APIRouter()


@router.post("/quotes", response_model=RentalQuote)
def create_quote(
    request: QuoteRequest,
    quote_service: RentalQuoteService = Depends(get_quote_service),
):
    price_model = quote_service.load_price_model(request.price_model)
    if isinstance(price_model, QuoteRejection):
        raise rejection_exception(price_model)

    result = quote_service.quote(price_model, request.availability, request.rental_range)
    if isinstance(result, QuoteRejection):
        raise rejection_exception(result)
    return result


@router.post("/availability/check", response_model=BookingCheck)
def check_availability(
    request: AvailabilityRequest,
    quote_service: RentalQuoteService = Depends(get_quote_service),
):
    result = quote_service.check_availability(request.availability, request.rental_range)
    if isinstance(result, QuoteRejection):
        raise rejection_exception(result)
    return result


@router.post("/availability/calendar", response_model=CalendarResponse)
def availability_calendar(
    request: AvailabilityRequest,
    quote_service: RentalQuoteService = Depends(get_quote_service),
):
    result = quote_service.calendar(
        request.availability, request.start_date, request.end_date
    )
    if isinstance(result, QuoteRejection):
        raise rejection_exception(result)
    return CalendarResponse(days=result)
