"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta e inmutabilidad (`frozen`) sin acoplar el Core a
  librerías de I/O.
- `SecretStr` evita que tokens y contraseñas aparezcan en `repr` o en logs.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from core.domain.errors import InvalidItemName

MAX_ITEM_NAME_LENGTH = 200

# Margen antes de la expiración real en el que el token ya no se considera válido.
REFRESH_MARGIN_SECONDS = 5 * 60


class Credentials(BaseModel):
    """Identidad estática de la cuenta Cookidoo (inmutable)."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, repr=False)
    password: SecretStr
    client_id: str = Field(..., min_length=1, repr=False)


class AuthToken(BaseModel):
    """Sesión utilizable.

    Por qué `expires_at` absoluto:
    - Se calcula una vez al recibir `expires_in`; el token se reemplaza entero
      en el cache, nunca campo a campo.
    - Usa el reloj monotónico del proceso (inmune a cambios de hora del host).
    """

    model_config = ConfigDict(frozen=True)

    access_token: SecretStr
    refresh_token: SecretStr | None = None
    expires_at: float = Field(..., description="Instante monotónico de expiración (segundos).")

    @classmethod
    def issued(
        cls,
        *,
        access_token: str,
        refresh_token: str | None,
        expires_in: float,
        now: float,
    ) -> "AuthToken":
        return cls(
            access_token=SecretStr(access_token),
            refresh_token=SecretStr(refresh_token) if refresh_token else None,
            expires_at=now + max(float(expires_in), 0.0),
        )

    @property
    def bearer(self) -> str:
        return self.access_token.get_secret_value()

    def needs_refresh(self, now: float) -> bool:
        return now + REFRESH_MARGIN_SECONDS >= self.expires_at


class ShoppingListItem(BaseModel):
    """Payload validado de una petición add-item."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=MAX_ITEM_NAME_LENGTH)

    @classmethod
    def from_raw(cls, raw_name: str | None) -> "ShoppingListItem":
        """Recorta espacios y valida longitud.

        Lanza `InvalidItemName` si queda vacío o supera 200 caracteres.
        """

        name = (raw_name or "").strip()
        if not name:
            raise InvalidItemName("Item name cannot be empty", empty=True)
        if len(name) > MAX_ITEM_NAME_LENGTH:
            raise InvalidItemName(
                f"Item name exceeds maximum length of {MAX_ITEM_NAME_LENGTH} characters"
            )
        return cls(name=name)


class FailureReason(str, Enum):
    INVALID_ITEM_NAME = "invalid_item_name"
    AUTHENTICATION_FAILED = "authentication_failed"
    REQUEST_FAILED = "request_failed"


@dataclass(frozen=True)
class Success:
    """El artículo quedó en la lista."""

    item_name: str
    message: str


@dataclass(frozen=True)
class Failure:
    """Intento fallido; `message` es seguro para ser hablado."""

    reason: FailureReason
    message: str


Outcome = Success | Failure
