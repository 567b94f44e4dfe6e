"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y el mapeo de errores de transporte.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import RequestError


def build_async_client(
    settings: AppSettings,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que auth y lista se comporten igual.
    - El cliente vive todo el proceso (reutiliza conexiones en warm starts).
    """

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    """Envía la petición y traduce fallos de transporte a `RequestError`.

    Las respuestas no-2xx se devuelven tal cual; decidir qué significan es
    cosa del adaptador que llama.
    """

    try:
        return await client.request(method, url, **kwargs)
    except httpx.TimeoutException:
        raise RequestError("Request timed out", kind="timeout") from None
    except httpx.ConnectError:
        raise RequestError("Failed to connect", kind="connect") from None
    except httpx.HTTPError as exc:
        raise RequestError(f"Transport failure: {type(exc).__name__}", kind="transport") from None
