"""Modelos de petición/respuesta de la plataforma de voz.

Por qué normalizar:
- La skill recibe tanto el sobre completo de Alexa como una forma plana
  (`requestType`, `intentName`, `slots`) usada por tests y por la CLI.
- `InboundRequest.from_payload` reduce ambas a un único modelo; lo que no
  encaja lanza `ValidationError` y el traductor lo trata como `Unknown`.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"


class InboundRequest(BaseModel):
    """Petición entrante normalizada."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    request_type: str = Field(..., alias="requestType", min_length=1)
    intent_name: str | None = Field(default=None, alias="intentName")
    slots: dict[str, str | None] = Field(default_factory=dict)
    session_id: str | None = Field(default=None, alias="sessionId")
    locale: str | None = Field(default=None)

    @field_validator("session_id", "locale", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        """Metadatos opcionales: un tipo inesperado no invalida la petición."""

        if isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InboundRequest":
        """Acepta el sobre de Alexa o la forma plana."""

        request = payload.get("request")
        if isinstance(request, Mapping):
            return cls.model_validate(_flatten_alexa_envelope(payload, request))
        return cls.model_validate(
            {**payload, "slots": _slot_values(payload.get("slots"))}
        )

    def slot(self, name: str) -> str:
        return self.slots.get(name) or ""


def _flatten_alexa_envelope(
    payload: Mapping[str, Any], request: Mapping[str, Any]
) -> dict[str, Any]:
    intent = request.get("intent")
    intent = intent if isinstance(intent, Mapping) else {}
    session = payload.get("session")
    session = session if isinstance(session, Mapping) else {}
    return {
        "requestType": request.get("type"),
        "intentName": intent.get("name"),
        "slots": _slot_values(intent.get("slots")),
        "sessionId": session.get("sessionId"),
        "locale": request.get("locale"),
    }


def _slot_values(raw: object) -> dict[str, str | None]:
    """Slots como `{nombre: valor}`; acepta valores planos o `{"value": ...}`."""

    if not isinstance(raw, Mapping):
        return {}
    out: dict[str, str | None] = {}
    for name, slot in raw.items():
        if isinstance(slot, Mapping):
            value = slot.get("value")
        else:
            value = slot
        out[str(name)] = value if isinstance(value, str) else None
    return out


class SkillResponse(BaseModel):
    """Respuesta hacia el host: texto hablado + continuidad de sesión."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spoken_text: str = Field(..., alias="spokenText", min_length=1)
    should_end_session: bool = Field(..., alias="shouldEndSession")

    def to_alexa(self) -> dict[str, Any]:
        """Sobre de respuesta Alexa (versión 1.0, PlainText)."""

        return {
            "version": "1.0",
            "response": {
                "outputSpeech": {"type": "PlainText", "text": self.spoken_text},
                "shouldEndSession": self.should_end_session,
            },
        }
