"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y los errores tipados.
- El dominio no conoce la CLI ni la configuración: solo conceptos del RUT.
"""
