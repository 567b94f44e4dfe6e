"""Adaptadores de la plataforma de voz (Alexa).

Por qué un paquete:
- Agrupa modelos de wire, traductor de intents, builder de respuestas y handler.
"""

from adapters.alexa.handler import SkillHandler
from adapters.alexa.intent_parser import parse
from adapters.alexa.models import InboundRequest, SkillResponse
from adapters.alexa.response_builder import ResponseBuilder

__all__ = [
	"InboundRequest",
	"ResponseBuilder",
	"SkillHandler",
	"SkillResponse",
	"parse",
]
