"""Contratos de autenticación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El Token Manager habla con `AuthenticationService`; el repositorio habla con
  `TokenProvider`. Ambos son sustituibles por dobles de test.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AuthToken, Credentials


@runtime_checkable
class AuthenticationService(Protocol):
    """Llamadas de red al endpoint de tokens.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Lanzan `AuthenticationFailed` ante rechazo y `RequestError` ante fallos
      de transporte o respuestas inesperadas.
    """

    async def authenticate(self, credentials: Credentials) -> AuthToken:
        """Login completo (`grant_type=password`)."""

        ...

    async def refresh(self, refresh_token: str) -> AuthToken:
        """Renovación (`grant_type=refresh_token`)."""

        ...


@runtime_checkable
class TokenProvider(Protocol):
    """Fuente de tokens válidos con cache compartido."""

    async def get_valid_token(self) -> AuthToken:
        ...

    def invalidate(self, token: AuthToken) -> None:
        """Descarta `token` si sigue siendo el cacheado."""

        ...
