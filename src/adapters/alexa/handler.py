"""Handler de la skill: una petición entra, una respuesta sale.

Cablea traductor -> orquestador -> builder por petición. El idioma hablado
sale del locale de la petición; sin locale soportado se usa el configurado.
Ningún fallo de una petición es fatal: lo inesperado se registra con
traceback y se responde con el mensaje genérico.
"""

from __future__ import annotations

import logging
from typing import Any

from adapters.alexa.intent_parser import normalize, parse_request
from adapters.alexa.models import SkillResponse
from adapters.alexa.response_builder import ResponseBuilder
from core.domain.commands import AddItem, Unknown, command_kind
from core.domain.language import Language
from core.services.add_item_service import AddItemService

logger = logging.getLogger(__name__)


class SkillHandler:
    def __init__(self, service: AddItemService, builder: ResponseBuilder) -> None:
        self._service = service
        self._builder = builder

    async def handle(self, payload: Any) -> SkillResponse:
        try:
            return await self._handle(payload)
        except Exception:
            logger.exception("Unhandled error while processing request", extra={"event": "request_failed"})
            return self._builder.error()

    async def _handle(self, payload: Any) -> SkillResponse:
        request = normalize(payload)
        command = parse_request(request) if request is not None else Unknown()
        session_id = request.session_id if request is not None else None
        locale = request.locale if request is not None else None
        language = Language.from_locale(locale, default=self._builder.language)
        builder = self._builder.for_language(language)

        logger.info(
            "Processing request",
            extra={
                "event": "command_received",
                "command": command_kind(command),
                "session_id": session_id,
                "language": language.value,
            },
        )

        if isinstance(command, AddItem):
            outcome = await self._service.execute(command.name, language=language)
            return builder.from_outcome(outcome)
        return builder.for_command(command)
