from __future__ import annotations

from ..common.datetime_utils import to_iso
from ..core.constants import TABLE_LOGS_REGISTRO
from ..database.connection import SupabaseConnection
from ..database.supabase_base import table_query
from .model import LogRegistro
from .repository import LogRegistroRepository


class SupabaseLogRegistroRepository(LogRegistroRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def add(self, entry: LogRegistro) -> None:
        with table_query(self._conn_factory, TABLE_LOGS_REGISTRO) as q:
            q.insert(
                [
                    {
                        "accion": entry.accion,
                        "fecha_registro": to_iso(entry.fecha_registro),
                    }
                ]
            ).execute()
