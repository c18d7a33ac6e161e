from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class TheaterConfig(AppConfig):
    name = "theater"
    verbose_name = "Theater statements"

    def ready(self) -> None:
        from theater.conf import get_pricing_table

        try:
            get_pricing_table()
        except ValueError as exc:
            raise ImproperlyConfigured(f"Invalid THEATER_PRICING: {exc}") from exc
