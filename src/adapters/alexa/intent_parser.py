"""Traductor de intents: petición entrante -> `ParsedCommand`.

Reglas:
- Nunca lanza; formas desconocidas o inválidas resuelven a `Unknown`.
- `AddItemIntent` sin slot (o vacío) sigue siendo `AddItem("")`: validar el
  nombre es trabajo del orquestador.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from adapters.alexa.models import (
    INTENT_REQUEST,
    LAUNCH_REQUEST,
    SESSION_ENDED_REQUEST,
    InboundRequest,
)
from core.domain.commands import AddItem, Cancel, Help, Launch, ParsedCommand, Stop, Unknown

ADD_ITEM_INTENT = "AddItemIntent"
ITEM_SLOT = "Item"

_SIMPLE_INTENTS: dict[str, ParsedCommand] = {
    "AMAZON.HelpIntent": Help(),
    "AMAZON.CancelIntent": Cancel(),
    "AMAZON.StopIntent": Stop(),
    "AMAZON.FallbackIntent": Unknown(),
}


def normalize(raw: Any) -> InboundRequest | None:
    """`InboundRequest` o `None` si la forma no es reconocible."""

    if isinstance(raw, InboundRequest):
        return raw
    if not isinstance(raw, Mapping):
        return None
    try:
        return InboundRequest.from_payload(raw)
    except ValidationError:
        return None


def parse(raw: Any) -> ParsedCommand:
    request = normalize(raw)
    if request is None:
        return Unknown()
    return parse_request(request)


def parse_request(request: InboundRequest) -> ParsedCommand:
    if request.request_type == LAUNCH_REQUEST:
        return Launch()
    if request.request_type == SESSION_ENDED_REQUEST:
        return Stop()
    if request.request_type != INTENT_REQUEST or not request.intent_name:
        return Unknown()

    if request.intent_name == ADD_ITEM_INTENT:
        return AddItem(name=request.slot(ITEM_SLOT))
    return _SIMPLE_INTENTS.get(request.intent_name, Unknown())
