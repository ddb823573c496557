"""Errores del cliente.

Todo error sale hacia quien llama sin reintentos ni resultados parciales.
"""

from __future__ import annotations

from typing import Any


class AwqatError(Exception):
    """Base de todos los errores de la librería."""


class ConfigError(AwqatError):
    """Configuración incompleta (p.ej. credenciales ausentes en el entorno)."""


class TransportError(AwqatError):
    """Fallo de red: conexión, DNS o timeout."""


class DecodeError(AwqatError):
    """El cuerpo no es JSON válido o no encaja con la forma esperada."""


class UnexpectedStatusError(AwqatError):
    """Código HTTP fuera de los conjuntos reconocidos. El cuerpo no se lee."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected HTTP response status code: {status_code}")
        self.status_code = status_code


class APIError(AwqatError):
    """La API respondió con un sobre de error (`success`/`message`)."""

    def __init__(
        self,
        status_code: int,
        *,
        success: bool = False,
        message: str = "",
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.success = success
        self.message = message
        self.data = data

    def __str__(self) -> str:
        if not self.message:
            return f"HTTP {self.status_code} API error (success={self.success})"
        return f"HTTP {self.status_code} API error (success={self.success}): {self.message}"


class AuthError(AwqatError):
    """El login falló; el cliente no llega a construirse."""
