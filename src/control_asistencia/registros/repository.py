from __future__ import annotations

from typing import Protocol, Sequence

from .model import Registro


class RegistroRepository(Protocol):
    """Repository interface for Registro.

    Note (DIP): services depend on this interface, not on Supabase directly.
    """

    def create(self, *, nombre: str, telefono: str) -> None:
        raise NotImplementedError

    def list_recent_first(self) -> Sequence[Registro]:
        raise NotImplementedError
