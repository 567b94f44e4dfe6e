"""Modelos de wire de la API Cookidoo."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CookidooAuthResponse(BaseModel):
    """Respuesta del endpoint OAuth de tokens.

    Campos extra (`token_type`, `scope`, ...) se ignoran.
    """

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    refresh_token: str | None = Field(default=None)
    expires_in: float = Field(..., ge=0, description="Vida del access token en segundos.")


class AddItemRequest(BaseModel):
    """Cuerpo JSON de la llamada add-item."""

    name: str = Field(..., min_length=1)
