from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import FichajeTipo


@dataclass(frozen=True)
class Fichaje:
    """Domain entity: clock-in/clock-out event tied to a registro."""

    usuario_id: int
    tipo: FichajeTipo
    fecha_evento: datetime
