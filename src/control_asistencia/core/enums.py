from __future__ import annotations

from enum import Enum


class View(str, Enum):
    """Pantalla activa de la aplicación."""

    FORM = "form"
    LIST = "list"


class FichajeTipo(str, Enum):
    """Tipo de fichaje tal como se guarda en la tabla `fichajes`."""

    INGRESO = "INGRESO"
    SALIDA = "SALIDA"

    @property
    def label(self) -> str:
        return "Entrada" if self is FichajeTipo.INGRESO else "Salida"
