from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from rental_quote.core.exceptions import (
    InvalidPriceModelException,
    InvalidRangeException,
)
from rental_quote.core.utils import day_count
from rental_quote.schemas import PriceModel, PriceTier, RentalQuote, RentalRange


def load_price_model(
    data: Union[PriceModel, Mapping[str, Any]], default_currency: str = "EUR"
) -> PriceModel:
    """Build a validated price model from caller data.

    Malformed tiers (``days_to < days_from``) and negative amounts are
    rejected here, once, so resolution never has to re-check them.
    """
    if isinstance(data, PriceModel):
        return data

    payload = dict(data)
    payload.setdefault("currency", default_currency)
    try:
        return PriceModel.model_validate(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidPriceModelException(problems) from e


def rental_days(rental_range: RentalRange) -> int:
    days = day_count(rental_range.start_date, rental_range.end_date)
    if days < 1:
        raise InvalidRangeException(
            f"end_date {rental_range.end_date} is before start_date {rental_range.start_date}"
        )
    return days


def resolve_tier(
    tiers: Sequence[PriceTier], duration_days: int
) -> Optional[PriceTier]:
    """Pick the matching tier with the largest ``days_from``.

    Tiers may overlap or leave gaps. On equal ``days_from`` the first one in
    input order is kept. Returns None when no tier covers the duration.
    """
    if duration_days < 1:
        raise InvalidRangeException(f"duration must be at least 1 day, got {duration_days}")

    selected = None
    for tier in tiers:
        if not tier.matches(duration_days):
            continue
        if selected is None or tier.days_from > selected.days_from:
            selected = tier
    return selected


def daily_rate(
    price_model: PriceModel, duration_days: int
) -> Tuple[int, Optional[PriceTier]]:
    tier = resolve_tier(price_model.tiers, duration_days)
    if tier is None:
        return price_model.fallback_daily_rate, None
    return tier.price_per_day, tier


def price_breakdown(price_model: PriceModel, duration_days: int) -> RentalQuote:
    price_per_day, tier = daily_rate(price_model, duration_days)
    subtotal = duration_days * price_per_day

    return RentalQuote(
        days=duration_days,
        price_per_day=price_model.money(price_per_day),
        rental_subtotal=price_model.money(subtotal),
        deposit=price_model.money(price_model.deposit),
        total=price_model.money(subtotal + price_model.deposit),
        tier=tier,
    )
