"""Cableado por proceso.

Por qué un contenedor:
- Se construye una vez en el cold start y se reutiliza en invocaciones warm:
  el cliente HTTP y el cache de tokens viven lo mismo que el proceso.
- Lambda y CLI comparten exactamente el mismo grafo de objetos.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from adapters.alexa.handler import SkillHandler
from adapters.alexa.response_builder import ResponseBuilder
from adapters.cookidoo.auth import CookidooAuthClient
from adapters.cookidoo.shopping_list import CookidooShoppingListRepository
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.services.add_item_service import AddItemService
from core.services.token_manager import TokenManager


@dataclass
class SkillContainer:
    settings: AppSettings
    http_client: httpx.AsyncClient
    token_manager: TokenManager
    repository: CookidooShoppingListRepository
    service: AddItemService
    handler: SkillHandler

    async def aclose(self) -> None:
        await self.http_client.aclose()


def build_container(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SkillContainer:
    """Crea todos los componentes; `transport` permite inyectar un MockTransport."""

    http_client = build_async_client(settings, transport=transport)
    auth_header = settings.auth_header.get_secret_value() if settings.auth_header else None
    auth = CookidooAuthClient(http_client, settings.token_url, auth_header=auth_header)
    token_manager = TokenManager(auth, settings.credentials())
    repository = CookidooShoppingListRepository(http_client, settings.items_url, token_manager)
    service = AddItemService(repository, language=settings.language)
    handler = SkillHandler(service, ResponseBuilder(settings.language))
    return SkillContainer(
        settings=settings,
        http_client=http_client,
        token_manager=token_manager,
        repository=repository,
        service=service,
        handler=handler,
    )
