from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import parse_iso_timestamp
from ..core.constants import TABLE_REGISTROS
from ..database.connection import SupabaseConnection
from ..database.supabase_base import fetchall, table_query
from .model import Registro
from .repository import RegistroRepository


class SupabaseRegistroRepository(RegistroRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, nombre: str, telefono: str) -> None:
        with table_query(self._conn_factory, TABLE_REGISTROS) as q:
            q.insert([{"nombre": nombre, "telefono": telefono}]).execute()

    def list_recent_first(self) -> Sequence[Registro]:
        with table_query(self._conn_factory, TABLE_REGISTROS) as q:
            response = q.select("*").order("created_at", desc=True).execute()
            rows = fetchall(response)
            return [
                Registro(
                    id=int(r["id"]),
                    created_at=parse_iso_timestamp(r.get("created_at")),
                    nombre=r.get("nombre") or "",
                    telefono=r.get("telefono") or "",
                )
                for r in rows
            ]
