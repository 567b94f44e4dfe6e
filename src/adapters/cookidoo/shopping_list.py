"""Repositorio remoto de la lista de la compra (implementa `ShoppingListRepository`).

Política de reintento:
- Un 401 real del servidor invalida el token cacheado y reintenta una sola vez
  tras pasar por el refill del `TokenProvider`.
- Cualquier otro no-2xx o fallo de transporte se propaga de inmediato.
"""

from __future__ import annotations

import logging

import httpx

from adapters.cookidoo.models import AddItemRequest
from adapters.http_client import send_request
from core.domain.errors import AuthenticationFailed, RequestError
from core.domain.models import AuthToken, ShoppingListItem
from core.interfaces.auth import TokenProvider
from core.interfaces.shopping_list import ShoppingListRepository

logger = logging.getLogger(__name__)


class CookidooShoppingListRepository(ShoppingListRepository):
    def __init__(
        self,
        client: httpx.AsyncClient,
        items_url: str,
        tokens: TokenProvider,
    ) -> None:
        self._client = client
        self._items_url = items_url
        self._tokens = tokens

    async def add_item(self, item: ShoppingListItem) -> None:
        body = AddItemRequest(name=item.name).model_dump(mode="json")

        token = await self._tokens.get_valid_token()
        response = await self._post(body, token, attempt=1)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            logger.warning(
                "Add-item rejected with 401, re-authenticating",
                extra={"event": "add_item_unauthorized", "attempt": 1},
            )
            self._tokens.invalidate(token)
            token = await self._tokens.get_valid_token()
            response = await self._post(body, token, attempt=2)

            if response.status_code == httpx.codes.UNAUTHORIZED:
                logger.error(
                    "Add-item rejected again after re-authentication",
                    extra={"event": "add_item_unauthorized", "attempt": 2},
                )
                raise AuthenticationFailed("Add-item rejected after retry")

        if response.is_success:
            return

        logger.error(
            "Add-item failed",
            extra={"event": "add_item_http_error", "status": response.status_code},
        )
        raise RequestError(
            f"Add-item answered {response.status_code}",
            status=response.status_code,
        )

    async def _post(self, body: dict, token: AuthToken, *, attempt: int) -> httpx.Response:
        logger.debug(
            "Posting item to shopping list",
            extra={"event": "add_item_request", "attempt": attempt},
        )
        return await send_request(
            self._client,
            "POST",
            self._items_url,
            json=body,
            headers={"Authorization": f"Bearer {token.bearer}"},
        )
