"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.cookidoo.auth import CookidooAuthClient
from adapters.http_client import build_async_client
from cli.ui_components import build_checks_table
from core.config import AppSettings, load_settings
from core.domain.errors import ConfigurationError, SkillError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_login(settings: AppSettings) -> tuple[bool, str]:
    """Perform one password login; only the outcome is reported, never the token."""

    auth_header = settings.auth_header.get_secret_value() if settings.auth_header else None
    async with build_async_client(settings) as client:
        auth = CookidooAuthClient(client, settings.token_url, auth_header=auth_header)
        try:
            token = await auth.authenticate(settings.credentials())
        except SkillError as exc:
            return False, exc.code
    detail = "refresh token issued" if token.refresh_token else "no refresh token issued"
    return True, detail


@app.command()
def run(
    skip_login: bool = typer.Option(False, "--skip-login", help="Do not contact the token endpoint."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = build_checks_table("Cookidoo Skill Doctor")

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        table.add_row("Configuration", "FAIL", exc.message)
        _console.print(table)
        _console.print(
            "\n[yellow]Note:[/yellow] set COOKIDOO_EMAIL, COOKIDOO_PASSWORD and COOKIDOO_CLIENT_ID "
            "(environment or .env)."
        )
        raise typer.Exit(code=1)

    table.add_row("Configuration", "OK", "Credentials present")
    table.add_row("Auth header", "OK" if settings.auth_header else "OPTIONAL", "set" if settings.auth_header else "not set")
    table.add_row("Token URL", "OK", settings.token_url)
    table.add_row("Items URL", "OK", settings.items_url)
    table.add_row("Language", "OK", settings.language.label())

    ok_login = True
    if skip_login:
        table.add_row("Login", "SKIPPED", "--skip-login")
    else:
        ok_login, detail = asyncio.run(_check_login(settings))
        table.add_row("Login", "OK" if ok_login else "FAIL", detail)

    _console.print(table)
    if not ok_login:
        raise typer.Exit(code=1)
