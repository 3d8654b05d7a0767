"""Configuración de logging para la CLI (Rich).

El Core nunca loguea; solo la capa CLI configura handlers.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Instala un `RichHandler` en stderr; idempotente entre comandos."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
