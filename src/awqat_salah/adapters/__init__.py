"""Adaptadores de I/O (httpx) que implementan los contratos del Core."""
