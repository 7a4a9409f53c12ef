from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import SupabaseConfig, SupabaseConnection
from .fichajes.repository import FichajeRepository
from .fichajes.service import FichajeService
from .fichajes.supabase_fichaje_repository import SupabaseFichajeRepository
from .logs.repository import LogRegistroRepository
from .logs.supabase_log_repository import SupabaseLogRegistroRepository
from .registros.repository import RegistroRepository
from .registros.service import RegistroService
from .registros.supabase_registro_repository import SupabaseRegistroRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[SupabaseConnection]

    registros_repo: RegistroRepository
    fichajes_repo: FichajeRepository
    logs_repo: LogRegistroRepository

    registro_service: RegistroService
    fichaje_service: FichajeService


def build_container(*, supabase_config: dict) -> Container:
    config = SupabaseConfig(
        url=str(supabase_config["url"]),
        key=str(supabase_config["key"]),
    )
    conn = SupabaseConnection.get_instance(config)

    registros_repo = SupabaseRegistroRepository(conn)
    fichajes_repo = SupabaseFichajeRepository(conn)
    logs_repo = SupabaseLogRegistroRepository(conn)

    return Container(
        conn=conn,
        registros_repo=registros_repo,
        fichajes_repo=fichajes_repo,
        logs_repo=logs_repo,
        registro_service=RegistroService(registros_repo, logs_repo),
        fichaje_service=FichajeService(fichajes_repo),
    )
