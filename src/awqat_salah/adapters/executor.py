"""Request Executor sobre httpx.

Responsabilidad:
- Construir la URL (endpoint + sufijo de ruta) contra la dirección base.
- Adjuntar Bearer token y headers JSON.
- Decodificar la respuesta según el status HTTP en un `AwqatResponse[shape]`
  o en un error tipado.

No hay reintentos, caché ni estado propio más allá del `httpx.Client`.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, ValidationError

from awqat_salah.adapters.http_client import JSON_HEADERS
from awqat_salah.core.domain.errors import (
    APIError,
    DecodeError,
    TransportError,
    UnexpectedStatusError,
)
from awqat_salah.core.domain.models import AwqatResponse
from awqat_salah.core.endpoints import HttpMethod

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODE = 200
ERROR_STATUS_CODES = frozenset({400, 401, 403, 404, 415, 500})


def join_path(url: str, suffix: str) -> str:
    """Añade `suffix` a la ruta de `url` sin dobles barras.

    Los segmentos vacíos del sufijo se descartan y la barra final de la ruta
    existente no se duplica. Un sufijo vacío (o solo barras) deja la URL intacta.
    """

    segments = [quote(segment, safe="") for segment in suffix.split("/") if segment]
    if not segments:
        return url
    parts = urlsplit(url)
    path = parts.path.rstrip("/") + "/" + "/".join(segments)
    return urlunsplit(parts._replace(path=path))


def _parse_method(method: HttpMethod | str) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(method.upper())
    except ValueError:
        raise ValueError(f"unsupported HTTP method: {method!r} (expected GET or POST)") from None


def _json_body(body: Mapping[str, Any] | BaseModel | None) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    return dict(body)


class HttpRequestExecutor:
    """Implementación de `RequestExecutor` sobre un `httpx.Client` síncrono.

    `token_provider` se consulta en cada petición; mientras devuelva un valor
    vacío no se envía `Authorization`.

    `timeout_seconds` es el plazo total de cada petición, desde el envío hasta
    el último byte del cuerpo. Los timeouts de httpx acotan cada fase por
    separado; el plazo total se comprueba al recibir los headers y tras cada
    fragmento del cuerpo.
    """

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        *,
        token_provider: Callable[[], str | None] | None = None,
        owns_client: bool = True,
        timeout_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._token_provider = token_provider or (lambda: None)
        self._owns_client = owns_client
        self._timeout_seconds = timeout_seconds
        self._clock = clock

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, method: HttpMethod, endpoint: str, path_suffix: str = "") -> str:
        url = urljoin(self._base_url, endpoint)
        if method is HttpMethod.GET:
            url = join_path(url, path_suffix)
        return url

    def build_headers(self) -> dict[str, str]:
        headers = dict(JSON_HEADERS)
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def execute(
        self,
        method: HttpMethod | str,
        endpoint: str,
        shape: Any,
        *,
        path_suffix: str = "",
        body: Mapping[str, Any] | BaseModel | None = None,
    ) -> AwqatResponse[Any]:
        verb = _parse_method(method)
        url = self.build_url(verb, endpoint, path_suffix)

        request = self._client.build_request(
            verb.value,
            url,
            json=_json_body(body) if verb is HttpMethod.POST else None,
            headers=self.build_headers(),
        )
        logger.debug("%s %s", verb.value, url)

        deadline = self._deadline()
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"{verb.value} {url} failed: {exc}") from exc

        try:
            self._check_deadline(deadline, url)
            logger.debug("%s %s -> HTTP %s", verb.value, url, response.status_code)
            return self._decode(response, shape, deadline)
        finally:
            response.close()

    def _deadline(self) -> float | None:
        if self._timeout_seconds is None:
            return None
        return self._clock() + self._timeout_seconds

    def _check_deadline(self, deadline: float | None, url: str) -> None:
        if deadline is not None and self._clock() > deadline:
            raise TransportError(f"{url}: request exceeded the overall timeout of {self._timeout_seconds}s")

    def _decode(self, response: httpx.Response, shape: Any, deadline: float | None) -> AwqatResponse[Any]:
        status = response.status_code

        if status == SUCCESS_STATUS_CODE:
            return self._read_envelope(response, AwqatResponse[shape], deadline)

        if status in ERROR_STATUS_CODES:
            envelope = self._read_envelope(response, AwqatResponse[Any], deadline)
            logger.debug("API error HTTP %s: %s", status, envelope.message)
            raise APIError(
                status,
                success=envelope.success,
                message=envelope.message,
                data=envelope.data,
            )

        raise UnexpectedStatusError(status)

    def _read_body(self, response: httpx.Response, deadline: float | None) -> bytes:
        url = str(response.request.url)
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                self._check_deadline(deadline, url)
        except httpx.DecodingError as exc:
            raise DecodeError(f"HTTP {response.status_code}: undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"reading response body failed: {exc}") from exc
        return b"".join(chunks)

    def _read_envelope(
        self,
        response: httpx.Response,
        envelope_type: type[AwqatResponse[Any]],
        deadline: float | None,
    ) -> AwqatResponse[Any]:
        raw = self._read_body(response, deadline)
        try:
            return envelope_type.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(
                f"HTTP {response.status_code}: response does not match {envelope_type.__name__}: {exc}"
            ) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
