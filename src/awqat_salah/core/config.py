"""Configuración del cliente.

- Centraliza variables de entorno (pydantic-settings) sin contaminar el cliente.
- Los adaptadores HTTP leen timeouts/headers de aquí de forma consistente.
"""

from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from awqat_salah import __version__

DEFAULT_BASE_URL = "https://awqatsalah.diyanet.gov.tr/"


def normalize_base_url(value: str) -> str:
    """Garantiza la barra final; `urljoin` descarta el último segmento si falta."""

    value = value.strip()
    return value if value.endswith("/") else value + "/"


class AwqatSettings(BaseSettings):
    """Configuración central del cliente Awqat Salah."""

    model_config = SettingsConfigDict(
        env_prefix="AWQAT_SALAH_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Dirección base de la API.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout total por request (segundos).",
    )
    user_agent: str = Field(
        default=f"awqat-salah/{__version__}",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    email: str | None = Field(
        default=None,
        description="Email de la cuenta API (solo para `AwqatClient.from_env`).",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Password de la cuenta API (solo para `AwqatClient.from_env`).",
    )

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return normalize_base_url(value)
