"""Vocabulario cerrado de comandos.

Por qué una unión cerrada de dataclasses:
- El set de intents de la plataforma es fijo; cada consumidor debe manejar
  todas las variantes (termina con `assert_never`).
- Añadir una variante es un cambio de diseño, no algo que el traductor
  pueda inventar.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AddItem:
    """Petición de añadir un artículo; `name` puede venir vacío."""

    name: str = ""


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class Launch:
    pass


@dataclass(frozen=True)
class Unknown:
    pass


ParsedCommand = Union[AddItem, Help, Cancel, Stop, Launch, Unknown]


def command_kind(command: ParsedCommand) -> str:
    """Nombre estable de la variante (para logs)."""

    return type(command).__name__
