from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LogRegistro:
    """Audit row written after a successful registration (best-effort)."""

    accion: str
    fecha_registro: datetime
