"""Interfaces/abstracciones del Core.

- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el cliente depende de abstracciones.
"""

from awqat_salah.core.interfaces.executor import RequestExecutor

__all__ = ["RequestExecutor"]
