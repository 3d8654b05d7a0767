"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos de valor puros y estrictos (Pydantic v2): clases de
  tipo, cotas, resultados y la taxonomía de errores.
- El dominio no conoce la CLI ni la configuración: solo conceptos del problema.
"""
