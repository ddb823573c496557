"""Core: configuración, dominio, catálogo de endpoints y contratos.

El Core no importa httpx; los adaptadores implementan sus contratos.
"""
