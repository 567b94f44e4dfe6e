"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en `invoke`, `add` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.alexa.models import SkillResponse


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (desactivado con `--json`)."""

    title = Text("Cookidoo Skill", style="bold cyan")
    subtitle = Text("Einkaufsliste • Alexa • Cookidoo", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_response_panel(response: SkillResponse) -> Panel:
    """Panel con el texto hablado y el estado de la sesión."""

    body = Text()
    body.append(response.spoken_text.strip() + "\n\n")
    if response.should_end_session:
        body.append("Session: ends", style="dim")
    else:
        body.append("Session: continues", style="green")
    return Panel(body, title=Text("Response", style="bold yellow"), border_style="yellow")


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
