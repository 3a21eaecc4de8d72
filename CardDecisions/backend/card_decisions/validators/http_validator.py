from typing import Any
import logging

import httpx

from card_decisions.config import Settings
from card_decisions.utils.http import UpstreamError, request_json
from card_decisions.validators.validator_base import FrequentFlyerNumberValidator


logger = logging.getLogger(__name__)


class HttpFrequentFlyerValidator(FrequentFlyerNumberValidator):
    """Validator backed by the remote frequent-flyer service.

    ``validation_mode`` is shared instance state read when ``is_valid`` builds
    its request, so concurrent evaluations must not share one instance; give
    each worker its own validator or serialize calls.
    """

    def __init__(self, settings: Settings, http_client: httpx.Client) -> None:
        super().__init__()
        self.settings = settings
        self.http_client = http_client

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.FREQUENT_FLYER_API_KEY}",
            "Accept": "application/json",
        }

    def endpoint(self, path: str) -> str:
        clean_path = path.lstrip("/")
        return f"{self.settings.FREQUENT_FLYER_BASE_URL}/{clean_path}"

    def get_license_key(self) -> str:
        payload = request_json(
            self.http_client,
            "GET",
            self.endpoint("service-information"),
            headers=self._headers,
        )
        license_obj: Any = payload.get("license")
        if not isinstance(license_obj, dict):
            logger.warning("event=validator_license_missing url=%s", self.endpoint("service-information"))
            return ""
        return str(license_obj.get("license_key") or "")

    def is_valid(self, frequent_flyer_number: str) -> bool:
        mode = self.validation_mode
        payload = request_json(
            self.http_client,
            "GET",
            self.endpoint("frequent-flyer-numbers/validate"),
            params={"number": frequent_flyer_number or "", "mode": mode.value},
            headers=self._headers,
        )
        valid = payload.get("valid")
        if not isinstance(valid, bool):
            raise UpstreamError(
                "Validator response is missing a boolean 'valid' field",
                details={"payload": payload},
            )

        logger.debug("event=frequent_flyer_lookup mode=%s valid=%s", mode.value, valid)
        self._notify_lookup_performed()
        return valid
