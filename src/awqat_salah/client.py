"""Sesión contra la API Awqat Salah.

`AwqatClient` guarda la dirección base, las credenciales y el access token, y
expone un accessor tipado por endpoint. El login ocurre en el constructor: si
falla, no hay cliente.

Concurrencia:
- El token se escribe una sola vez (durante el login) y no se refresca.
- Tras la construcción el cliente es efectivamente inmutable y puede usarse
  desde varios hilos en modo solo lectura.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from awqat_salah.adapters.executor import HttpRequestExecutor
from awqat_salah.adapters.http_client import build_client
from awqat_salah.core import endpoints
from awqat_salah.core.config import AwqatSettings, normalize_base_url
from awqat_salah.core.domain.errors import APIError, AuthError, AwqatError, ConfigError
from awqat_salah.core.domain.models import (
    Credentials,
    DailyContent,
    Location,
    PrayerTime,
    PrayerTimeEid,
)
from awqat_salah.core.endpoints import Endpoint
from awqat_salah.core.interfaces.executor import RequestExecutor

logger = logging.getLogger(__name__)


class AwqatClient:
    """Cliente síncrono de la API.

    Parámetros:
    - `credentials`: email/password de la cuenta.
    - `base_url`: sobrescribe `settings.base_url`.
    - `settings`: `AwqatSettings`; por defecto se leen del entorno.
    - `http_client`: `httpx.Client` propio (p.ej. con `MockTransport`). El
      cliente no lo cierra; sí cierra el que construye él mismo.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        base_url: str | None = None,
        settings: AwqatSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = settings or AwqatSettings()
        if base_url is not None:
            settings = settings.model_copy(update={"base_url": normalize_base_url(base_url)})

        self._settings = settings
        self._credentials = credentials
        self._access_token = ""

        owns_client = http_client is None
        self._executor: RequestExecutor = HttpRequestExecutor(
            http_client if http_client is not None else build_client(settings),
            settings.base_url,
            token_provider=lambda: self._access_token,
            owns_client=owns_client,
            timeout_seconds=settings.http_timeout_seconds,
        )

        try:
            self._login()
        except Exception:
            self._executor.close()
            raise

    @classmethod
    def from_env(cls, settings: AwqatSettings | None = None, **kwargs: Any) -> "AwqatClient":
        """Construye el cliente con `AWQAT_SALAH_EMAIL` / `AWQAT_SALAH_PASSWORD`."""

        settings = settings or AwqatSettings()
        if not settings.email or settings.password is None:
            raise ConfigError("AWQAT_SALAH_EMAIL and AWQAT_SALAH_PASSWORD must be set")
        credentials = Credentials(email=settings.email, password=settings.password)
        return cls(credentials, settings=settings, **kwargs)

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def access_token(self) -> str:
        return self._access_token

    def _login(self) -> None:
        try:
            envelope = self._executor.execute(
                endpoints.LOGIN.method,
                endpoints.LOGIN.path,
                endpoints.LOGIN.response_type,
                body=self._credentials.login_payload(),
            )
        except AwqatError as exc:
            raise AuthError(f"login failed: {exc}") from exc

        auth = envelope.data
        if not envelope.success or auth is None or not auth.access_token:
            raise AuthError(f"login failed: {envelope.message or 'no access token in response'}")

        # El refresh token se descarta: no hay renovación automática.
        self._access_token = auth.access_token
        logger.info("Logged in to %s", self.base_url)
        logger.debug("Login account: %s", self._credentials.email)

    def _fetch(self, endpoint: Endpoint, path_suffix: int | str = "") -> Any:
        envelope = self._executor.execute(
            endpoint.method,
            endpoint.path,
            endpoint.response_type,
            path_suffix=str(path_suffix),
        )
        if not envelope.success:
            raise APIError(200, success=False, message=envelope.message, data=envelope.data)
        if envelope.data is None:
            return [] if endpoint.many else None
        return envelope.data

    # Lugares

    def countries(self) -> list[Location]:
        return self._fetch(endpoints.COUNTRIES)

    def states(self) -> list[Location]:
        return self._fetch(endpoints.STATES)

    def cities(self) -> list[Location]:
        return self._fetch(endpoints.CITIES)

    def states_by_country_id(self, country_id: int | str) -> list[Location]:
        return self._fetch(endpoints.STATES, country_id)

    def cities_by_state_id(self, state_id: int | str) -> list[Location]:
        return self._fetch(endpoints.CITIES, state_id)

    # Contenido diario

    def daily_content(self) -> DailyContent | None:
        return self._fetch(endpoints.DAILY_CONTENT)

    # Horarios de oración

    def prayer_time_daily_by_city_id(self, city_id: int | str) -> list[PrayerTime]:
        return self._fetch(endpoints.PRAYER_TIME_DAILY, city_id)

    def prayer_time_weekly_by_city_id(self, city_id: int | str) -> list[PrayerTime]:
        return self._fetch(endpoints.PRAYER_TIME_WEEKLY, city_id)

    def prayer_time_monthly_by_city_id(self, city_id: int | str) -> list[PrayerTime]:
        return self._fetch(endpoints.PRAYER_TIME_MONTHLY, city_id)

    def prayer_time_ramadan_by_city_id(self, city_id: int | str) -> list[PrayerTime]:
        return self._fetch(endpoints.PRAYER_TIME_RAMADAN, city_id)

    def prayer_time_eid_by_city_id(self, city_id: int | str) -> PrayerTimeEid | None:
        return self._fetch(endpoints.PRAYER_TIME_EID, city_id)

    def close(self) -> None:
        self._executor.close()

    def __enter__(self) -> "AwqatClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AwqatClient(base_url={self.base_url!r}, email={self._credentials.email!r})"
