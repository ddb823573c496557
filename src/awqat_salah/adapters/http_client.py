"""Wrapper de httpx.

- Estandariza timeout, headers y redirects para todas las peticiones.
- Se puede sustituir por un `httpx.Client` con `MockTransport` en tests.
"""

from __future__ import annotations

import httpx

from awqat_salah.core.config import AwqatSettings

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_client(
    settings: AwqatSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults de la API.

    `httpx.Timeout` acota cada fase (conexión, escritura, lectura y pool) por
    separado; el plazo total por petición lo impone `HttpRequestExecutor`.
    """

    settings = settings or AwqatSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        **JSON_HEADERS,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
