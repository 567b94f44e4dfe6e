"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras: credenciales, tokens, artículos,
  comandos y resultados.
- El dominio no conoce HTTP, Alexa ni Lambda: solo conceptos del problema.
"""
