import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values, load_dotenv
from pydantic import BaseModel


ENV_FILE = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_FILE, override=True)
_ENV_FILE_VALUES: Mapping[str, str | None] = dotenv_values(ENV_FILE)


def _cfg(primary: str, *aliases: str, default: str = "") -> str:
    """First non-blank value for any of the names: process env, then the .env file."""
    names = (primary, *aliases)
    for source in (os.environ, _ENV_FILE_VALUES):
        for name in names:
            raw = source.get(name)
            if raw is not None and str(raw).strip():
                return str(raw)
    return default


class Settings(BaseModel):
    LOG_LEVEL: str = _cfg("LOG_LEVEL", default="INFO").upper()

    FREQUENT_FLYER_BASE_URL: str = _cfg(
        "FREQUENT_FLYER_BASE_URL", default="http://localhost:8081/api/v1"
    ).rstrip("/")
    FREQUENT_FLYER_API_KEY: str = _cfg("FREQUENT_FLYER_API_KEY", "FFN_API_KEY", default="")

    HTTP_TIMEOUT_SECONDS: float = float(_cfg("HTTP_TIMEOUT_SECONDS", default="15"))


_settings = Settings()


def get_settings() -> Settings:
    return _settings
