"""Modelos del dominio (Pydantic v2).

Nota:
- La API usa claves camelCase (`dayOfYear`, `hijriDateShortIso8601`...). Los
  modelos exponen atributos snake_case y aceptan ambos nombres al validar.
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Credentials(BaseModel):
    """Par email/password usado en `auth/login`. Inmutable."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, description="Email de la cuenta API.")
    password: SecretStr = Field(..., description="Password de la cuenta API.")

    def login_payload(self) -> dict[str, str]:
        """Cuerpo JSON de la petición de login (con el password en claro)."""

        return {"email": self.email, "password": self.password.get_secret_value()}


class AwqatResponse(BaseModel, Generic[T]):
    """Sobre uniforme (`data`, `success`, `message`) de toda respuesta de la API."""

    model_config = ConfigDict(extra="ignore")

    data: T | None = None
    success: bool = False
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class AuthResponse(_Payload):
    access_token: str
    refresh_token: str | None = None


class Location(_Payload):
    """País, provincia (state) o ciudad."""

    id: int
    code: str | None = None
    name: str | None = None


class DailyContent(_Payload):
    """Contenido religioso del día: versículo, hadiz y oración con sus fuentes."""

    id: int
    day_of_year: int
    verse: str | None = None
    verse_source: str | None = None
    hadith: str | None = None
    hadith_source: str | None = None
    pray: str | None = None
    pray_source: str | None = None


class PrayerTime(_Payload):
    """Horarios de un día para una ciudad.

    Todos los valores llegan como texto tal cual los formatea la API: horas
    `HH:MM`, fechas hijri/gregorianas en forma corta, larga e ISO 8601, y la URL
    de la imagen de la fase lunar.
    """

    shape_moon_url: str | None = None
    fajr: str | None = None
    sunrise: str | None = None
    dhuhr: str | None = None
    asr: str | None = None
    maghrib: str | None = None
    isha: str | None = None
    astronomical_sunset: str | None = None
    astronomical_sunrise: str | None = None
    hijri_date_short: str | None = None
    hijri_date_short_iso8601: str | None = None
    hijri_date_long_iso8601: str | None = None
    hijri_date_long: str | None = None
    qibla_time: str | None = None
    gregorian_date_short: str | None = None
    gregorian_date_short_iso8601: str | None = None
    gregorian_date_long: str | None = None
    gregorian_date_long_iso8601: str | None = None


class PrayerTimeEid(_Payload):
    """Fecha hijri, fecha gregoriana y hora de la oración de Eid al-Adha y Eid al-Fitr."""

    eid_al_adha_hijri: str | None = None
    eid_al_adha_time: str | None = None
    eid_al_adha_date: str | None = None
    eid_al_fitr_hijri: str | None = None
    eid_al_fitr_time: str | None = None
    eid_al_fitr_date: str | None = None
