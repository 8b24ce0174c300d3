"""Modelos del dominio.

Por qué:
- Aquí viven las peticiones y resultados de ejecución (Pydantic v2).
- El dominio no conoce asyncio, CLI ni terminal: solo conceptos del problema.
"""
