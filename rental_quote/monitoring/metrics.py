from prometheus_client import Counter, Histogram, Info
from prometheus_fastapi_instrumentator import Instrumentator

from rental_quote.schemas import RejectionReason

# Business metrics
quotes_total = Counter(
    "rental_quote_quotes_total",
    "Total number of quote requests",
    ["service", "outcome", "reason"],  # outcome=quoted/rejected, reason="" when quoted
)

quoted_rental_days = Histogram(
    "rental_quote_quoted_rental_days",
    "Length in days of successfully quoted rentals",
    ["service"],
    buckets=[1, 2, 3, 5, 7, 14, 30, 60, 90, 180, 365],
)

availability_checks_total = Counter(
    "rental_quote_availability_checks_total",
    "Total number of availability checks",
    ["service", "bookable"],
)

price_models_rejected_total = Counter(
    "rental_quote_price_models_rejected_total",
    "Total number of price models rejected at load",
    ["service"],
)

calendar_days_classified = Counter(
    "rental_quote_calendar_days_classified_total",
    "Total number of days classified for calendar views",
    ["service"],
)

# Application info
app_info = Info("rental_quote_app_info", "Application information")


def setup_instrumentator() -> Instrumentator:
    return Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_respect_env_var=False,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics", "/api/v1/health"],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )


def init_app_info(version: str = "1.0.0"):
    app_info.info({"version": version, "service": "rental-quote", "component": "api"})


class MetricsCollector:
    SERVICE_NAME = "rental-quote"

    @staticmethod
    def record_quote(days: int):
        quotes_total.labels(
            service=MetricsCollector.SERVICE_NAME, outcome="quoted", reason=""
        ).inc()
        quoted_rental_days.labels(service=MetricsCollector.SERVICE_NAME).observe(days)

    @staticmethod
    def record_rejection(reason: RejectionReason):
        quotes_total.labels(
            service=MetricsCollector.SERVICE_NAME,
            outcome="rejected",
            reason=reason.value,
        ).inc()

    @staticmethod
    def record_price_model_rejection():
        price_models_rejected_total.labels(service=MetricsCollector.SERVICE_NAME).inc()

    @staticmethod
    def record_availability_check(bookable: bool):
        availability_checks_total.labels(
            service=MetricsCollector.SERVICE_NAME, bookable=str(bookable).lower()
        ).inc()

    @staticmethod
    def record_calendar(days: int):
        calendar_days_classified.labels(service=MetricsCollector.SERVICE_NAME).inc(days)
