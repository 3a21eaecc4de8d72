from __future__ import annotations

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    AUTO_ACCEPTED = "auto_accepted"
    AUTO_DECLINED = "auto_declined"
    REFERRED_TO_HUMAN = "referred_to_human"


class ValidationMode(str, Enum):
    QUICK = "quick"
    DETAILED = "detailed"
    NONE = "none"
