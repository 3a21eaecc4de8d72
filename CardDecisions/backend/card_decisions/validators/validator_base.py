from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from card_decisions.services.evaluation.types import ValidationMode


logger = logging.getLogger(__name__)

LookupListener = Callable[["FrequentFlyerNumberValidator"], None]


@dataclass
class ValidityOut:
    is_valid: bool = False


class FrequentFlyerNumberValidator(ABC):
    """Capability consumed by the application evaluator.

    Implementations must call ``_notify_lookup_performed`` once after every
    successful lookup; listeners are invoked synchronously on the calling
    thread.
    """

    def __init__(self) -> None:
        self._validation_mode = ValidationMode.NONE
        self._listeners: list[LookupListener] = []
        self._lock = RLock()

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        self._validation_mode = ValidationMode(mode)

    @abstractmethod
    def get_license_key(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def is_valid(self, frequent_flyer_number: str) -> bool:
        raise NotImplementedError

    def check_into(self, frequent_flyer_number: str, out: ValidityOut) -> None:
        out.is_valid = bool(self.is_valid(frequent_flyer_number))

    def add_lookup_listener(self, listener: LookupListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_lookup_listener(self, listener: LookupListener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return

    def _notify_lookup_performed(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(self)
            except Exception:
                logger.exception("event=lookup_listener_failed listener=%r", listener)
