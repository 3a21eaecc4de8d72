import logging

import httpx

from card_decisions.config import Settings, get_settings
from card_decisions.services.application_evaluator import CreditCardApplicationEvaluator
from card_decisions.validators.http_validator import HttpFrequentFlyerValidator


def _setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s event=%(message)s",
    )


def create_evaluator(
    settings: Settings | None = None,
    http_client: httpx.Client | None = None,
) -> CreditCardApplicationEvaluator:
    settings = settings or get_settings()
    _setup_logging(settings.LOG_LEVEL)

    if http_client is None:
        http_client = httpx.Client(timeout=settings.HTTP_TIMEOUT_SECONDS)

    validator = HttpFrequentFlyerValidator(settings=settings, http_client=http_client)
    return CreditCardApplicationEvaluator(validator)
