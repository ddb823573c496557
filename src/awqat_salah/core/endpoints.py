"""Catálogo de endpoints de la API.

Cada accessor del cliente es una fila de esta tabla: verbo, ruta, forma del
payload y si la API devuelve uno o varios elementos.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from awqat_salah.core.domain.models import (
    AuthResponse,
    DailyContent,
    Location,
    PrayerTime,
    PrayerTimeEid,
)


class HttpMethod(str, Enum):
    """Verbos soportados por el executor."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class Endpoint:
    method: HttpMethod
    path: str
    shape: type[BaseModel]
    many: bool = False

    @property
    def response_type(self) -> object:
        """Tipo que debe decodificar `data`: `shape` o `list[shape]`."""

        return list[self.shape] if self.many else self.shape  # type: ignore[valid-type]


LOGIN = Endpoint(HttpMethod.POST, "auth/login", AuthResponse)

COUNTRIES = Endpoint(HttpMethod.GET, "api/place/countries", Location, many=True)
STATES = Endpoint(HttpMethod.GET, "api/place/states", Location, many=True)
CITIES = Endpoint(HttpMethod.GET, "api/place/cities", Location, many=True)

DAILY_CONTENT = Endpoint(HttpMethod.GET, "api/DailyContent", DailyContent)

PRAYER_TIME_DAILY = Endpoint(HttpMethod.GET, "api/PrayerTime/Daily", PrayerTime, many=True)
PRAYER_TIME_WEEKLY = Endpoint(HttpMethod.GET, "api/PrayerTime/Weekly", PrayerTime, many=True)
PRAYER_TIME_MONTHLY = Endpoint(HttpMethod.GET, "api/PrayerTime/Monthly", PrayerTime, many=True)
PRAYER_TIME_RAMADAN = Endpoint(HttpMethod.GET, "api/PrayerTime/Ramadan", PrayerTime, many=True)
PRAYER_TIME_EID = Endpoint(HttpMethod.GET, "api/PrayerTime/Eid", PrayerTimeEid)
