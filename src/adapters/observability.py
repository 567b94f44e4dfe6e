"""Logging estructurado.

Invariantes:
- Todo log incluye timestamp, level, logger y message.
- Solo se emiten extras de una lista blanca de metadatos no sensibles; nunca
  credenciales ni tokens.
- JSON en producción (CloudWatch), texto legible en desarrollo.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Extras que el core adjunta a sus eventos (ver `extra=` en los servicios).
SAFE_EXTRA_FIELDS: tuple[str, ...] = (
    "event",
    "command",
    "session_id",
    "language",
    "item_name",
    "status",
    "kind",
    "error_code",
    "attempt",
)

_HANDLER_NAME = "cookidoo-skill"


class JSONFormatter(logging.Formatter):
    """Formatea cada registro como una línea JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in SAFE_EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configura el logger raíz una sola vez por proceso.

    Llamadas repetidas (warm starts, CLI + Lambda en tests) reemplazan el
    handler propio en vez de duplicarlo.
    """

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx registra URLs y cabeceras a nivel DEBUG/INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return handler
