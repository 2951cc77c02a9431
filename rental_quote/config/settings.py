from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file() -> str:
    env_file = ".env" if Path("/.dockerenv").exists() else ".env.local"

    current_path = Path.cwd()

    for path in [current_path] + list(current_path.parents):
        env_path = path / env_file
        if env_path.exists():
            return str(env_path)

    return env_file


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "rental-quote"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Pricing
    default_currency: str = "EUR"  # used when a price model omits its currency

    # Limits
    max_rental_days: int = 365  # longer ranges are rejected as InvalidRange
    max_calendar_days: int = 366  # widest window a calendar query may cover
