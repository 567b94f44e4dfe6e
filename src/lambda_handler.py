"""Entry point del host (AWS Lambda).

Por qué un event loop propio del proceso:
- `asyncio.run` crearía un loop nuevo por invocación y el `httpx.AsyncClient`
  y la tarea de refill quedarían ligados a un loop cerrado.
- Con un loop persistente, el contenedor (cliente + cache de tokens) se
  reutiliza en invocaciones warm.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from adapters.observability import setup_logging
from core.config import load_settings
from core.services.container import SkillContainer, build_container

logger = logging.getLogger(__name__)

_loop: asyncio.AbstractEventLoop | None = None
_container: SkillContainer | None = None


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def get_container() -> SkillContainer:
    """Construye el contenedor en el cold start.

    Sin configuración válida lanza `ConfigurationError`: la invocación falla
    en vez de responder con un estado degradado.
    """

    global _container
    if _container is None:
        settings = load_settings()
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Cold start - initializing container", extra={"event": "cold_start"})
        _container = build_container(settings)
    return _container


def handler(event: Any, context: Any = None) -> dict[str, Any]:
    container = get_container()
    response = _get_loop().run_until_complete(container.handler.handle(event))
    return response.to_alexa()


def reset() -> None:
    """Descarta contenedor y loop (equivale a un cold start)."""

    global _container, _loop
    if _container is not None:
        # Sin invocaciones previas no hay loop: `_get_loop` crea uno temporal.
        _get_loop().run_until_complete(_container.aclose())
    if _loop is not None and not _loop.is_closed():
        _loop.close()
    _container = None
    _loop = None
