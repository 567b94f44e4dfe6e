"""CLI de desarrollo.

Permite ejecutar peticiones de la skill en local contra la API real (o la
configurada en `COOKIDOO_BASE_URL`) sin desplegar la Lambda.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from adapters.alexa.models import SkillResponse
from adapters.observability import setup_logging
from cli import doctor
from cli.ui_components import build_response_panel, print_banner
from core.config import load_settings
from core.domain.errors import ConfigurationError
from core.services.container import build_container

app = typer.Typer(no_args_is_help=True, help="Cookidoo shopping-list voice skill.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


async def _dispatch(payload: Any) -> SkillResponse:
    settings = load_settings()
    setup_logging(settings.log_level, "text")
    container = build_container(settings)
    try:
        return await container.handler.handle(payload)
    finally:
        await container.aclose()


def _run_and_print(payload: Any, *, as_json: bool) -> None:
    try:
        response = asyncio.run(_dispatch(payload))
    except ConfigurationError as exc:
        _console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=2)

    if as_json:
        _console.print_json(json.dumps(response.to_alexa(), ensure_ascii=False))
        return
    print_banner(_console)
    _console.print(build_response_panel(response))


@app.command()
def invoke(
    request_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON request (Alexa envelope or flat shape)."),
    as_json: bool = typer.Option(False, "--json", help="Print the Alexa response envelope as JSON."),
) -> None:
    """Run one request file through the skill handler."""

    try:
        payload = json.loads(request_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}") from exc
    _run_and_print(payload, as_json=as_json)


@app.command()
def add(
    name: str = typer.Argument(..., help="Item to add, e.g. 'Milch'."),
    as_json: bool = typer.Option(False, "--json", help="Print the Alexa response envelope as JSON."),
) -> None:
    """Add one item, as if spoken through AddItemIntent."""

    payload = {
        "requestType": "IntentRequest",
        "intentName": "AddItemIntent",
        "slots": {"Item": name},
        "sessionId": "cli",
    }
    _run_and_print(payload, as_json=as_json)


def run() -> None:
    app()
