from __future__ import annotations

from card_decisions.models.application import CreditCardApplication
from card_decisions.services.evaluation.types import CreditCardApplicationDecision, ValidationMode

HIGH_INCOME_THRESHOLD = 100_000
LOW_INCOME_THRESHOLD = 20_000
DETAILED_AGE_THRESHOLD = 30
LOW_AGE_THRESHOLD = 20

LICENSE_KEY_EXPIRED = "EXPIRED"


def is_high_income(application: CreditCardApplication) -> bool:
    return application.gross_annual_income >= HIGH_INCOME_THRESHOLD


def is_license_expired(license_key: str | None) -> bool:
    return license_key == LICENSE_KEY_EXPIRED


def select_validation_mode(application: CreditCardApplication) -> ValidationMode:
    if application.age >= DETAILED_AGE_THRESHOLD:
        return ValidationMode.DETAILED
    return ValidationMode.QUICK


def decide_after_lookup(
    application: CreditCardApplication, is_valid: bool
) -> tuple[CreditCardApplicationDecision, str]:
    """Apply the post-lookup guards in order.

    Returns the decision together with the name of the guard that produced it,
    so callers can log which stage decided.
    """

    if not is_valid:
        return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "invalid_frequent_flyer_number"
    if application.age < LOW_AGE_THRESHOLD:
        return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "young_applicant"
    if application.gross_annual_income < LOW_INCOME_THRESHOLD:
        return CreditCardApplicationDecision.AUTO_DECLINED, "low_income"
    return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "default_referral"
