"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: orquestador y repositorio dependen de
  capacidades (autenticar, añadir artículo), no de httpx.
"""
