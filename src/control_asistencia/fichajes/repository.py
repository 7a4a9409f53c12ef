from __future__ import annotations

from typing import Protocol

from .model import Fichaje


class FichajeRepository(Protocol):
    """Write-only: fichajes are never read back by this app."""

    def add(self, fichaje: Fichaje) -> None:
        raise NotImplementedError
