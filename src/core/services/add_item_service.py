"""Caso de uso: añadir un artículo a la lista de la compra.

Este es el único lugar con reglas de negocio: valida el nombre y traduce los
errores del repositorio a un `Outcome` hablable. Los detalles técnicos se
registran en logs y nunca se devuelven al usuario.
"""

from __future__ import annotations

import logging

from core.domain.errors import AuthenticationFailed, InvalidItemName, RequestError
from core.domain.language import Language
from core.domain.messages import messages_for
from core.domain.models import (
    Failure,
    FailureReason,
    Outcome,
    ShoppingListItem,
    Success,
)
from core.interfaces.shopping_list import ShoppingListRepository

logger = logging.getLogger(__name__)


class AddItemService:
    def __init__(
        self,
        repository: ShoppingListRepository,
        *,
        language: Language = Language.GERMAN,
    ) -> None:
        self._repository = repository
        self._messages = messages_for(language)

    async def execute(self, raw_name: str | None, *, language: Language | None = None) -> Outcome:
        """Valida y añade el artículo; `language` elige el catálogo de esta petición."""

        messages = messages_for(language) if language is not None else self._messages
        try:
            item = ShoppingListItem.from_raw(raw_name)
        except InvalidItemName as exc:
            logger.warning(
                "Invalid item name",
                extra={"event": "add_item_invalid", "error_code": exc.code},
            )
            text = messages.missing_item if exc.empty else messages.name_too_long
            return Failure(reason=FailureReason.INVALID_ITEM_NAME, message=text)

        try:
            await self._repository.add_item(item)
        except AuthenticationFailed as exc:
            logger.error(
                "Authentication failed while adding item",
                extra={"event": "add_item_failed", "error_code": exc.code},
            )
            return Failure(
                reason=FailureReason.AUTHENTICATION_FAILED,
                message=messages.add_failed,
            )
        except RequestError as exc:
            logger.error(
                "Repository error while adding item",
                extra={
                    "event": "add_item_failed",
                    "error_code": exc.code,
                    "status": exc.status,
                    "kind": exc.kind,
                },
            )
            return Failure(
                reason=FailureReason.REQUEST_FAILED,
                message=messages.add_failed,
            )

        logger.info(
            "Item added to shopping list",
            extra={"event": "add_item_succeeded", "item_name": item.name},
        )
        return Success(item_name=item.name, message=messages.added(item.name))
