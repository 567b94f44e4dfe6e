"""Adaptador de autenticación Cookidoo (implementa `AuthenticationService`).

Fase única:
- `authenticate`: `grant_type=password` con las credenciales del proceso.
- `refresh`: `grant_type=refresh_token`.
Ambas devuelven un `AuthToken` nuevo; el cache lo gestiona el `TokenManager`.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

import httpx
from pydantic import ValidationError

from adapters.cookidoo.models import CookidooAuthResponse
from adapters.http_client import send_request
from core.domain.errors import AuthenticationFailed, RequestError
from core.domain.models import AuthToken, Credentials
from core.interfaces.auth import AuthenticationService

logger = logging.getLogger(__name__)

# Estados con los que el endpoint rechaza credenciales o refresh tokens.
_REJECTED_STATUSES = frozenset({400, 401, 403})


class CookidooAuthClient(AuthenticationService):
    def __init__(
        self,
        client: httpx.AsyncClient,
        token_url: str,
        *,
        auth_header: str | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._token_url = token_url
        self._auth_header = auth_header
        self._clock = clock

    async def authenticate(self, credentials: Credentials) -> AuthToken:
        form = {
            "grant_type": "password",
            "username": credentials.email,
            "password": credentials.password.get_secret_value(),
            "client_id": credentials.client_id,
        }
        return await self._request_token(form, grant="password")

    async def refresh(self, refresh_token: str) -> AuthToken:
        form = {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        return await self._request_token(form, grant="refresh_token")

    async def _request_token(self, form: dict[str, str], *, grant: str) -> AuthToken:
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self._auth_header:
            headers["Authorization"] = self._auth_header

        logger.info("Requesting token", extra={"event": "auth_attempt", "kind": grant})
        response = await send_request(
            self._client, "POST", self._token_url, data=form, headers=headers
        )

        if response.status_code in _REJECTED_STATUSES:
            logger.warning(
                "Token endpoint rejected the grant",
                extra={"event": "auth_rejected", "kind": grant, "status": response.status_code},
            )
            raise AuthenticationFailed(f"Token endpoint rejected {grant} grant")
        if not response.is_success:
            logger.error(
                "Unexpected status from token endpoint",
                extra={"event": "auth_error", "kind": grant, "status": response.status_code},
            )
            raise RequestError(
                f"Token endpoint answered {response.status_code}",
                status=response.status_code,
            )

        try:
            payload = CookidooAuthResponse.model_validate_json(response.content)
        except ValidationError:
            # No se re-lanza el ValidationError: su input contiene los tokens.
            raise RequestError(
                "Malformed token response", kind="invalid_response"
            ) from None

        return AuthToken.issued(
            access_token=payload.access_token,
            refresh_token=payload.refresh_token,
            expires_in=payload.expires_in,
            now=self._clock(),
        )
