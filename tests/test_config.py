# tests/test_config.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from awqat_salah import AwqatSettings, __version__
from awqat_salah.adapters.http_client import build_client
from awqat_salah.core.config import DEFAULT_BASE_URL, normalize_base_url


def test_defaults(monkeypatch):
    for name in ("AWQAT_SALAH_BASE_URL", "AWQAT_SALAH_HTTP_TIMEOUT_SECONDS", "AWQAT_SALAH_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    settings = AwqatSettings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL == "https://awqatsalah.diyanet.gov.tr/"
    assert settings.http_timeout_seconds == 60.0
    assert settings.user_agent == f"awqat-salah/{__version__}"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("AWQAT_SALAH_BASE_URL", "https://mirror.test/awqat")
    monkeypatch.setenv("AWQAT_SALAH_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("AWQAT_SALAH_PASSWORD", "pw")

    settings = AwqatSettings(_env_file=None)

    assert settings.base_url == "https://mirror.test/awqat/"
    assert settings.http_timeout_seconds == 5.0
    assert settings.password.get_secret_value() == "pw"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        AwqatSettings(http_timeout_seconds=0, _env_file=None)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://a.test", "https://a.test/"),
        ("https://a.test/", "https://a.test/"),
        ("  https://a.test/v1 ", "https://a.test/v1/"),
    ],
)
def test_normalize_base_url(raw, expected):
    assert normalize_base_url(raw) == expected


def test_build_client_applies_settings():
    settings = AwqatSettings(http_timeout_seconds=12.5, user_agent="ua/1", _env_file=None)

    with build_client(settings, extra_headers={"X-Trace": "1"}) as client:
        assert client.timeout.read == 12.5
        assert client.timeout.connect == 12.5
        assert client.headers["User-Agent"] == "ua/1"
        assert client.headers["Accept"] == "application/json"
        assert client.headers["Content-Type"] == "application/json"
        assert client.headers["X-Trace"] == "1"
        assert client.follow_redirects is True
