from __future__ import annotations

from ..common.datetime_utils import to_iso
from ..core.constants import TABLE_FICHAJES
from ..database.connection import SupabaseConnection
from ..database.supabase_base import table_query
from .model import Fichaje
from .repository import FichajeRepository


class SupabaseFichajeRepository(FichajeRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def add(self, fichaje: Fichaje) -> None:
        with table_query(self._conn_factory, TABLE_FICHAJES) as q:
            q.insert(
                [
                    {
                        "usuario_id": fichaje.usuario_id,
                        "tipo": fichaje.tipo.value,
                        "fecha_evento": to_iso(fichaje.fecha_evento),
                    }
                ]
            ).execute()
