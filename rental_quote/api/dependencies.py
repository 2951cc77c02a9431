from functools import lru_cache

from fastapi import Depends

from rental_quote.config.settings import Settings
from rental_quote.services.quote import RentalQuoteService


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_quote_service(settings: Settings = Depends(get_settings)) -> RentalQuoteService:
    return RentalQuoteService(settings)
