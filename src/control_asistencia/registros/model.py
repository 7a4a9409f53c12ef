from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Registro:
    """Domain entity: registered person's contact record.

    Note: Plain data object (no backend access code).
    """

    id: int
    created_at: Optional[datetime]
    nombre: str
    telefono: str
