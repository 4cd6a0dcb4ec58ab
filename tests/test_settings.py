import logging

import pytest
from _pytest.monkeypatch import MonkeyPatch
from pydantic import ValidationError

from vies.logger import get_logger, logging_handler
from vies.settings import Settings


def test__settings__defaults() -> None:
    settings = Settings()

    assert settings.service_url == "https://ec.europa.eu/taxation_customs/vies/services/checkVatService"
    assert settings.server_fault_code == "soap:Server"
    assert settings.timeout == 30.0


def test__settings__env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("VIES_TIMEOUT", "2.5")
    monkeypatch.setenv("VIES_USER_AGENT", "my-shop")
    monkeypatch.setenv("VIES_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.timeout == 2.5
    assert settings.user_agent == "my-shop"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "key,value", [("VIES_TIMEOUT", "0"), ("VIES_SERVICE_URL", "ftp://example.com"), ("VIES_LOG_LEVEL", "FOO")]
)
def test__settings__invalid(key: str, value: str, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        Settings()


def test__get_logger() -> None:
    logger = get_logger("vies.test")

    assert get_logger("vies.test") is logger
    assert logger.handlers.count(logging_handler) == 1
    assert logger.level == logging.getLevelName(Settings().log_level)
