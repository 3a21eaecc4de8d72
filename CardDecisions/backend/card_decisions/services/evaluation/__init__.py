from card_decisions.services.evaluation.gates import (
    DETAILED_AGE_THRESHOLD,
    HIGH_INCOME_THRESHOLD,
    LICENSE_KEY_EXPIRED,
    LOW_AGE_THRESHOLD,
    LOW_INCOME_THRESHOLD,
    decide_after_lookup,
    is_high_income,
    is_license_expired,
    select_validation_mode,
)
from card_decisions.services.evaluation.types import CreditCardApplicationDecision, ValidationMode

__all__ = [
    "DETAILED_AGE_THRESHOLD",
    "HIGH_INCOME_THRESHOLD",
    "LICENSE_KEY_EXPIRED",
    "LOW_AGE_THRESHOLD",
    "LOW_INCOME_THRESHOLD",
    "decide_after_lookup",
    "is_high_income",
    "is_license_expired",
    "select_validation_mode",
    "CreditCardApplicationDecision",
    "ValidationMode",
]
