"""Contrato del repositorio de la lista de la compra."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ShoppingListItem


@runtime_checkable
class ShoppingListRepository(Protocol):
    async def add_item(self, item: ShoppingListItem) -> None:
        """Añade `item` a la lista remota.

        Lanza `AuthenticationFailed` o `RequestError`; no devuelve nada en éxito.
        """

        ...
