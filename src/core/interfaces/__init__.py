"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El motor de conversión depende del contrato del primitivo de parseo, no de
  una implementación concreta.
"""
