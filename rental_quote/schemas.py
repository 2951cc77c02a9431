from datetime import date
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AvailabilityStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    PENDING = "pending"
    UNAVAILABLE = "unavailable"


class RejectionReason(str, Enum):
    INVALID_RANGE = "InvalidRange"
    INVALID_PRICE_MODEL = "InvalidPriceModel"
    RANGE_NOT_FULLY_AVAILABLE = "RangeNotFullyAvailable"
    DATE_EXPLICITLY_BLOCKED = "DateExplicitlyBlocked"
    DATE_ALREADY_RENTED = "DateAlreadyRented"
    DATE_ALREADY_PENDING = "DateAlreadyPending"
    DATE_MARKED_UNAVAILABLE = "DateMarkedUnavailable"
    DATE_HAS_NO_AVAILABILITY_RECORD = "DateHasNoAvailabilityRecord"

    @property
    def is_availability_conflict(self) -> bool:
        return self not in (
            RejectionReason.INVALID_RANGE,
            RejectionReason.INVALID_PRICE_MODEL,
        )


class Money(BaseModel):
    """Amount in minor units (cents) of a single currency."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=0)
    currency: str = Field(pattern=r"^[A-Z]{3}$")


# Pricing


class PriceTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    days_from: int = Field(ge=1)
    days_to: Optional[int] = Field(None, description="None means unbounded")
    price_per_day: int = Field(ge=0, description="Minor units")

    @model_validator(mode="after")
    def _check_bounds(self) -> "PriceTier":
        if self.days_to is not None and self.days_to < self.days_from:
            raise ValueError(
                f"days_to ({self.days_to}) is lower than days_from ({self.days_from})"
            )
        return self

    def matches(self, duration_days: int) -> bool:
        if duration_days < self.days_from:
            return False
        return self.days_to is None or duration_days <= self.days_to


class PriceModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: str = Field("EUR", pattern=r"^[A-Z]{3}$")
    tiers: Tuple[PriceTier, ...] = ()
    deposit: int = Field(0, ge=0)
    fallback_daily_rate: int = Field(0, ge=0)

    def money(self, amount: int) -> Money:
        return Money(amount=amount, currency=self.currency)


# Availability


class AvailabilityPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    status: AvailabilityStatus
    include_weekends: bool = True

    @model_validator(mode="after")
    def _check_order(self) -> "AvailabilityPeriod":
        if self.end_date < self.start_date:
            raise ValueError(
                f"period ends ({self.end_date}) before it starts ({self.start_date})"
            )
        return self


class AvailabilityState(BaseModel):
    # Periods may overlap and arrive in any order.
    model_config = ConfigDict(frozen=True)

    is_always_available: bool = False
    periods: Tuple[AvailabilityPeriod, ...] = ()
    unavailable_dates: FrozenSet[date] = frozenset()


class RentalRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date


# Results


class RentalQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    days: int = Field(ge=1)
    price_per_day: Money
    rental_subtotal: Money
    deposit: Money
    total: Money
    tier: Optional[PriceTier] = Field(
        None, description="Applied tier, None when the fallback rate was used"
    )


class QuoteRejection(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: RejectionReason
    day: Optional[date] = None
    detail: str = ""


class BookingCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    bookable: bool
    reason: Optional[RejectionReason] = None
    day: Optional[date] = None


class CalendarDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: date
    status: AvailabilityStatus


# API payloads


class QuoteRequest(BaseModel):
    # Price model stays raw so that load failures surface as InvalidPriceModel.
    price_model: Dict[str, Any]
    availability: AvailabilityState = AvailabilityState()
    start_date: date
    end_date: date

    @property
    def rental_range(self) -> RentalRange:
        return RentalRange(start_date=self.start_date, end_date=self.end_date)


class AvailabilityRequest(BaseModel):
    availability: AvailabilityState
    start_date: date
    end_date: date

    @property
    def rental_range(self) -> RentalRange:
        return RentalRange(start_date=self.start_date, end_date=self.end_date)


class CalendarResponse(BaseModel):
    days: List[CalendarDay]


class HealthResponse(BaseModel):
    ok: bool = True
