"""Construcción de respuestas habladas.

Política de sesión:
- Success / Failure / Stop / Cancel cierran la sesión.
- Launch / Help / Unknown la mantienen abierta para que el usuario reintente.
"""

from __future__ import annotations

from typing import assert_never

from adapters.alexa.models import SkillResponse
from core.domain.commands import AddItem, Cancel, Help, Launch, ParsedCommand, Stop, Unknown
from core.domain.language import Language
from core.domain.messages import messages_for
from core.domain.models import Failure, Outcome, Success

UNKNOWN_ENDS_SESSION = False


class ResponseBuilder:
    def __init__(self, language: Language = Language.GERMAN) -> None:
        self.language = language
        self._messages = messages_for(language)

    def for_language(self, language: Language) -> "ResponseBuilder":
        """Builder con el catálogo de `language` (el propio si ya coincide)."""

        if language is self.language:
            return self
        return ResponseBuilder(language)

    def from_outcome(self, outcome: Outcome) -> SkillResponse:
        if isinstance(outcome, Success):
            return self._build(outcome.message, end_session=True)
        if isinstance(outcome, Failure):
            return self._build(outcome.message, end_session=True)
        assert_never(outcome)

    def for_command(self, command: ParsedCommand) -> SkillResponse:
        """Respuesta para comandos que no pasan por el orquestador."""

        if isinstance(command, Launch):
            return self._build(self._messages.welcome, end_session=False)
        if isinstance(command, Help):
            return self._build(self._messages.help, end_session=False)
        if isinstance(command, (Stop, Cancel)):
            return self._build(self._messages.goodbye, end_session=True)
        if isinstance(command, Unknown):
            return self._build(self._messages.unknown, end_session=UNKNOWN_ENDS_SESSION)
        if isinstance(command, AddItem):
            raise ValueError("AddItem responses are built from an Outcome")
        assert_never(command)

    def error(self) -> SkillResponse:
        """Respuesta genérica cuando el handler falla de forma inesperada."""

        return self._build(self._messages.internal_error, end_session=True)

    @staticmethod
    def _build(text: str, *, end_session: bool) -> SkillResponse:
        return SkillResponse(spoken_text=text, should_end_session=end_session)
