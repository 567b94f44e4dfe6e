"""Entry point de desarrollo de la skill (sin instalar el paquete).

Ejecuta la CLI local de la skill con:
- `python -m main add Milch` (añade un artículo como si llegara por voz)
- `python -m main invoke request.json` (procesa un sobre Alexa guardado)
- `python -m main doctor run` (comprueba configuración y login)

En producción el punto de entrada es `lambda_handler.handler`.

Motivo:
- El código vive en `src/` (layout tipo "src"), así que sin editable install
  Python no encuentra `cli`, `core`, etc.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
