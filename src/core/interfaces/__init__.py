"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementa la capa de presentación.
- Permite que el Core y los comandos no dependan de una consola concreta.
"""
