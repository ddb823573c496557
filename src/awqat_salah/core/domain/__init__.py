"""Modelos y errores del dominio.

- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP: solo los conceptos de la API.
"""
