"""Taxonomía de errores del dominio.

Por qué una jerarquía propia:
- El orquestador captura `SkillError` en su borde y lo traduce a un `Outcome`
  sin conocer httpx ni códigos HTTP.
- Cada error lleva un `code` estable para logs; el mensaje nunca incluye
  credenciales ni tokens.
"""

from __future__ import annotations


class SkillError(Exception):
    """Base de todos los errores de la skill."""

    code = "skill_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidItemName(SkillError):
    """Nombre de artículo vacío o demasiado largo (corregible por el usuario)."""

    code = "invalid_item_name"

    def __init__(self, message: str, *, empty: bool = False) -> None:
        super().__init__(message)
        self.empty = empty


class AuthenticationFailed(SkillError):
    """Credenciales rechazadas o refresh + login agotados."""

    code = "authentication_failed"


class RequestError(SkillError):
    """Fallo HTTP/transporte no relacionado con la autorización.

    Lleva `status` (respuesta no-2xx) o `kind` (timeout, connect, transport,
    invalid_response).
    """

    code = "request_error"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        kind: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.kind = kind or ("http_status" if status is not None else "transport")


class TokenExpired(SkillError):
    """Disparador interno de refill; nunca llega al usuario."""

    code = "token_expired"


class ConfigurationError(SkillError):
    """Configuración requerida ausente: fatal en el arranque del proceso."""

    code = "configuration_error"
