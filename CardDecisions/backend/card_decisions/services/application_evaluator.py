from __future__ import annotations

import logging
from collections.abc import Callable
from threading import RLock

from card_decisions.models.application import CreditCardApplication
from card_decisions.services.evaluation import (
    CreditCardApplicationDecision,
    decide_after_lookup,
    is_high_income,
    is_license_expired,
    select_validation_mode,
)
from card_decisions.validators.validator_base import FrequentFlyerNumberValidator, ValidityOut


logger = logging.getLogger(__name__)


class CreditCardApplicationEvaluator:
    def __init__(self, validator: FrequentFlyerNumberValidator) -> None:
        self.validator = validator
        self._lookup_count = 0
        self._lock = RLock()
        self.validator.add_lookup_listener(self._on_lookup_performed)

    @property
    def validator_lookup_count(self) -> int:
        with self._lock:
            return self._lookup_count

    def _on_lookup_performed(self, _validator: FrequentFlyerNumberValidator) -> None:
        with self._lock:
            self._lookup_count += 1

    def close(self) -> None:
        self.validator.remove_lookup_listener(self._on_lookup_performed)

    def evaluate(self, application: CreditCardApplication) -> CreditCardApplicationDecision:
        return self._evaluate(application, self.validator.is_valid)

    def evaluate_using_out(self, application: CreditCardApplication) -> CreditCardApplicationDecision:
        def _lookup(frequent_flyer_number: str) -> bool:
            out = ValidityOut()
            self.validator.check_into(frequent_flyer_number, out)
            return out.is_valid

        return self._evaluate(application, _lookup)

    def _evaluate(
        self,
        application: CreditCardApplication,
        lookup: Callable[[str], bool],
    ) -> CreditCardApplicationDecision:
        if is_high_income(application):
            return self._decided(CreditCardApplicationDecision.AUTO_ACCEPTED, "high_income")

        try:
            license_key = self.validator.get_license_key()
        except Exception as exc:
            logger.warning(
                "event=validator_license_check_failed error_type=%s error=%s",
                type(exc).__name__,
                str(exc),
            )
            return self._decided(CreditCardApplicationDecision.REFERRED_TO_HUMAN, "license_check_error")

        if is_license_expired(license_key):
            logger.warning("event=validator_license_expired")
            return self._decided(CreditCardApplicationDecision.REFERRED_TO_HUMAN, "license_expired")

        mode = select_validation_mode(application)
        self.validator.validation_mode = mode

        try:
            is_valid = bool(lookup(application.frequent_flyer_number))
        except Exception as exc:
            logger.warning(
                "event=frequent_flyer_lookup_failed mode=%s error_type=%s error=%s",
                mode.value,
                type(exc).__name__,
                str(exc),
            )
            return self._decided(CreditCardApplicationDecision.REFERRED_TO_HUMAN, "validator_error")

        decision, stage = decide_after_lookup(application, is_valid)
        return self._decided(decision, stage)

    @staticmethod
    def _decided(decision: CreditCardApplicationDecision, stage: str) -> CreditCardApplicationDecision:
        logger.info("event=application_evaluated decision=%s stage=%s", decision.value, stage)
        return decision
