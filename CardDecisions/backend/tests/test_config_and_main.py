import httpx

from card_decisions import config
from card_decisions.config import Settings, get_settings
from card_decisions.main import create_evaluator
from card_decisions.models.application import CreditCardApplication
from card_decisions.services.application_evaluator import CreditCardApplicationEvaluator
from card_decisions.services.evaluation import CreditCardApplicationDecision
from card_decisions.validators.http_validator import HttpFrequentFlyerValidator


def test_cfg_prefers_primary_then_alias_then_default(monkeypatch):
    monkeypatch.delenv("FREQUENT_FLYER_API_KEY", raising=False)
    monkeypatch.setenv("FFN_API_KEY", "alias-key")
    assert config._cfg("FREQUENT_FLYER_API_KEY", "FFN_API_KEY") == "alias-key"

    monkeypatch.setenv("FREQUENT_FLYER_API_KEY", "primary-key")
    assert config._cfg("FREQUENT_FLYER_API_KEY", "FFN_API_KEY") == "primary-key"

    monkeypatch.setenv("CARD_DECISIONS_UNSET_TEST_KEY", "   ")
    assert config._cfg("CARD_DECISIONS_UNSET_TEST_KEY", default="fallback") == "fallback"


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()
    assert isinstance(get_settings().HTTP_TIMEOUT_SECONDS, float)


def test_create_evaluator_wires_http_validator():
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"license": {"license_key": "OK"}}))
    )
    settings = Settings(FREQUENT_FLYER_BASE_URL="https://ffn.test", LOG_LEVEL="DEBUG")

    evaluator = create_evaluator(settings=settings, http_client=client)

    assert isinstance(evaluator, CreditCardApplicationEvaluator)
    assert isinstance(evaluator.validator, HttpFrequentFlyerValidator)
    assert evaluator.validator.http_client is client
    assert evaluator.evaluate(CreditCardApplication(gross_annual_income=120_000)) == CreditCardApplicationDecision.AUTO_ACCEPTED


def test_create_evaluator_refers_when_service_information_unavailable():
    requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(503, text="maintenance")

    evaluator = create_evaluator(
        settings=Settings(FREQUENT_FLYER_BASE_URL="https://ffn.test"),
        http_client=httpx.Client(transport=httpx.MockTransport(_handler)),
    )

    decision = evaluator.evaluate(CreditCardApplication(age=42))

    assert decision == CreditCardApplicationDecision.REFERRED_TO_HUMAN
    assert [r.url.path for r in requests] == ["/service-information"]
    assert evaluator.validator.validation_mode.value == "none"
    assert evaluator.validator_lookup_count == 0
