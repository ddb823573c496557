"""Cliente Python para la API Awqat Salah (horarios de oración).

Uso típico::

    from awqat_salah import AwqatClient, Credentials

    with AwqatClient(Credentials(email="me@example.com", password="secret")) as client:
        for country in client.countries():
            print(country.id, country.name)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from awqat_salah.client import AwqatClient  # noqa: E402
from awqat_salah.core.config import AwqatSettings  # noqa: E402
from awqat_salah.core.domain.errors import (  # noqa: E402
    APIError,
    AuthError,
    AwqatError,
    ConfigError,
    DecodeError,
    TransportError,
    UnexpectedStatusError,
)
from awqat_salah.core.domain.models import (  # noqa: E402
    AuthResponse,
    AwqatResponse,
    Credentials,
    DailyContent,
    Location,
    PrayerTime,
    PrayerTimeEid,
)

__all__ = [
    "APIError",
    "AuthError",
    "AuthResponse",
    "AwqatClient",
    "AwqatError",
    "AwqatResponse",
    "AwqatSettings",
    "ConfigError",
    "Credentials",
    "DailyContent",
    "DecodeError",
    "Location",
    "PrayerTime",
    "PrayerTimeEid",
    "TransportError",
    "UnexpectedStatusError",
    "__version__",
]
