"""Ciclo de vida credenciales -> token.

Responsabilidad:
- Devolver un bearer token válido minimizando round-trips entre invocaciones.
- Refill con fallback: un refresh; si falla, un login; si falla, error.
- Single-flight: con el slot caducado, solo una llamada de autenticación en
  vuelo; los demás callers esperan esa misma tarea y comparten su resultado.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

from core.domain.errors import AuthenticationFailed, SkillError, TokenExpired
from core.domain.models import AuthToken, Credentials
from core.interfaces.auth import AuthenticationService
from core.services.token_cache import TokenCache

logger = logging.getLogger(__name__)


class TokenManager:
    def __init__(
        self,
        auth: AuthenticationService,
        credentials: Credentials,
        *,
        cache: TokenCache | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._auth = auth
        self._credentials = credentials
        self._cache = cache or TokenCache()
        self._clock = clock
        self._inflight: asyncio.Future[AuthToken] | None = None

    @property
    def cache(self) -> TokenCache:
        return self._cache

    async def get_valid_token(self) -> AuthToken:
        """Token del cache si sigue fuera del margen de 5 minutos; si no, refill.

        Lanza `AuthenticationFailed` cuando refresh y login se agotan.
        """

        try:
            token = self._cached_token()
        except TokenExpired as exc:
            logger.info(str(exc), extra={"event": "token_cache_miss"})
            return await self._join_refill()

        logger.debug("Using cached token", extra={"event": "token_cache_hit"})
        return token

    def invalidate(self, token: AuthToken) -> None:
        """Descarta `token` tras un 401 del servidor (revocado fuera de banda)."""

        if self._cache.clear_if(token):
            logger.info("Cached token invalidated", extra={"event": "token_invalidated"})

    def _cached_token(self) -> AuthToken:
        token = self._cache.get()
        if token is None:
            raise TokenExpired("No cached token")
        if token.needs_refresh(self._clock()):
            raise TokenExpired("Cached token inside refresh margin")
        return token

    async def _join_refill(self) -> AuthToken:
        # Sin await entre la lectura y la escritura de `_inflight`: en un
        # mismo event loop solo el primer caller crea la tarea.
        inflight = self._inflight
        if inflight is None:
            inflight = asyncio.ensure_future(self._refill())
            self._inflight = inflight
        else:
            logger.debug("Joining in-flight token refill", extra={"event": "token_refill_joined"})
        # shield: si un caller se cancela, el refill sigue para los demás.
        return await asyncio.shield(inflight)

    async def _refill(self) -> AuthToken:
        try:
            current = self._cache.get()
            if current is not None and current.refresh_token is not None:
                try:
                    token = await self._auth.refresh(current.refresh_token.get_secret_value())
                except Exception as exc:
                    # Cualquier fallo del refresh (no solo SkillError) cae al login.
                    logger.warning(
                        "Token refresh failed, falling back to login",
                        extra={"event": "token_refresh_failed", "error_code": _error_code(exc)},
                    )
                    self._cache.clear()
                else:
                    self._cache.set(token)
                    logger.info("Token refreshed", extra={"event": "token_refreshed"})
                    return token

            try:
                token = await self._auth.authenticate(self._credentials)
            except Exception as exc:
                self._cache.clear()
                logger.error(
                    "Login failed",
                    extra={"event": "login_failed", "error_code": _error_code(exc)},
                )
                raise AuthenticationFailed("Refresh and login exhausted") from exc

            self._cache.set(token)
            logger.info("Login performed", extra={"event": "login_performed"})
            return token
        finally:
            self._inflight = None


def _error_code(exc: Exception) -> str:
    return exc.code if isinstance(exc, SkillError) else type(exc).__name__
