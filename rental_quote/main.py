from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from rental_quote import __version__
from rental_quote.api.dependencies import get_settings
from rental_quote.api.v1 import health, quotes
from rental_quote.config.logging import setup_logging
from rental_quote.monitoring.metrics import init_app_info, setup_instrumentator


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.settings = settings

    logger.info(
        f"Starting {settings.service_name} {__version__}: "
        f"default_currency={settings.default_currency}, "
        f"max_rental_days={settings.max_rental_days}, "
        f"max_calendar_days={settings.max_calendar_days}"
    )
    yield
    logger.info(f"Shutting down {settings.service_name}")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Rental Quote Service",
        description="Tiered pricing and availability checks for equipment rentals",
        version=__version__,
        lifespan=lifespan,
    )

    setup_instrumentator().instrument(app).expose(app, include_in_schema=False)
    init_app_info(__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(quotes.router, prefix="/api/v1", tags=["quotes"])

    return app


def main():
    import uvicorn

    uvicorn.run(
        "rental_quote.main:app",
        host="0.0.0.0",
        port=8000,
        log_config=None,
    )


app = create_app()


if __name__ == "__main__":
    main()
