"""Contrato del Request Executor.

Reglas de diseño:
- `execute` es síncrono y bloqueante: una petición, una respuesta.
- Es genérico sobre la forma decodificada; quien llama elige `X` o `list[X]`.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel

from awqat_salah.core.domain.models import AwqatResponse
from awqat_salah.core.endpoints import HttpMethod


@runtime_checkable
class RequestExecutor(Protocol):
    """Único punto de salida a la red."""

    def execute(
        self,
        method: HttpMethod | str,
        endpoint: str,
        shape: Any,
        *,
        path_suffix: str = "",
        body: Mapping[str, Any] | BaseModel | None = None,
    ) -> AwqatResponse[Any]:
        """Envía la petición y devuelve el sobre decodificado como `AwqatResponse[shape]`.

        Lanza `APIError`, `DecodeError`, `TransportError` o `UnexpectedStatusError`.
        """

        ...

    def close(self) -> None:
        ...
