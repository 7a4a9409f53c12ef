from __future__ import annotations

from typing import Protocol

from .model import LogRegistro


class LogRegistroRepository(Protocol):
    def add(self, entry: LogRegistro) -> None:
        raise NotImplementedError
