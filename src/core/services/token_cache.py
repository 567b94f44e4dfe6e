"""Cache en memoria de un único token.

Sobrevive entre invocaciones "warm" del mismo proceso y se pierde en un cold
start (la siguiente llamada simplemente se autentica de nuevo).
"""

from __future__ import annotations

import threading

from core.domain.models import AuthToken


class TokenCache:
    """Slot único, last-write-wins.

    Los tokens son inmutables y se reemplazan por referencia, así que un
    lector nunca observa un token a medio escribir. El lock serializa a los
    escritores (y permite usar el cache desde varios hilos si el host lo hace).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._token: AuthToken | None = None

    def get(self) -> AuthToken | None:
        with self._lock:
            return self._token

    def set(self, token: AuthToken) -> None:
        with self._lock:
            self._token = token

    def clear(self) -> None:
        with self._lock:
            self._token = None

    def clear_if(self, token: AuthToken) -> bool:
        """Compare-and-clear: vacía el slot solo si aún contiene `token`."""

        with self._lock:
            if self._token is token:
                self._token = None
                return True
            return False
