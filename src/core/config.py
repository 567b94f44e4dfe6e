"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar el handler.
- Permite que adaptadores (HTTP/Cookidoo/logging) lean config de forma consistente.
- Las credenciales se cargan una sola vez por proceso (cold start).
"""

from __future__ import annotations

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigurationError
from core.domain.language import Language
from core.domain.models import Credentials


class AppSettings(BaseSettings):
    """Configuración central de la skill.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para Lambda/CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="COOKIDOO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    email: str = Field(
        ...,
        min_length=1,
        description="E-mail de la cuenta Cookidoo.",
    )
    password: SecretStr = Field(
        ...,
        description="Contraseña de la cuenta Cookidoo.",
    )
    client_id: str = Field(
        ...,
        min_length=1,
        description="Client id OAuth enviado en el login por contraseña.",
    )
    auth_header: SecretStr | None = Field(
        default=None,
        description="Cabecera Authorization estática para el endpoint de tokens (opcional).",
    )

    base_url: str = Field(
        default="https://de.tmmobile.vorwerk-digital.com",
        min_length=8,
        description="Base URL de la API Cookidoo.",
    )
    token_path: str = Field(
        default="/ciam/auth/token",
        min_length=1,
        description="Ruta del endpoint OAuth de tokens.",
    )
    items_path: str = Field(
        default="/shopping/de-DE/additional-items/add",
        min_length=1,
        description="Ruta del endpoint que añade artículos a la lista.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="AlexaCookidooSkill/1.0",
        min_length=1,
        description="User-Agent para las peticiones a Cookidoo.",
    )

    language: Language = Field(
        default=Language.GERMAN,
        description="Idioma de las respuestas habladas (de/en).",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|text)$",
        description="Formato de logs: 'json' (CloudWatch) o 'text' (desarrollo).",
    )

    @property
    def token_url(self) -> str:
        return self.base_url.rstrip("/") + self.token_path

    @property
    def items_url(self) -> str:
        return self.base_url.rstrip("/") + self.items_path

    def credentials(self) -> Credentials:
        return Credentials(
            email=self.email,
            password=self.password,
            client_id=self.client_id,
        )


def load_settings(**overrides: object) -> AppSettings:
    """Carga la configuración o aborta con `ConfigurationError`.

    Solo se reportan los nombres de los campos inválidos; nunca sus valores.
    """

    try:
        return AppSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise ConfigurationError(
            "Missing or invalid configuration: " + ", ".join(fields)
        ) from None
