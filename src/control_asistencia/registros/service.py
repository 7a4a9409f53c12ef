from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.constants import (
    LOG_ACCION_NUEVO_REGISTRO,
    MSG_LISTA_ERROR,
    MSG_REGISTRO_ERROR,
    MSG_REGISTRO_OK,
    MSG_TABLAS_FALTANTES,
    PG_UNDEFINED_TABLE,
)
from ..core.exceptions import BackendError
from ..logs.model import LogRegistro
from ..logs.repository import LogRegistroRepository
from .model import Registro
from .repository import RegistroRepository

logger = logging.getLogger(__name__)


class RegistroService:
    """Use cases: register a contact, list registered contacts."""

    def __init__(self, registros: RegistroRepository, logs: LogRegistroRepository):
        self._registros = registros
        self._logs = logs

    @staticmethod
    def describe_save_error(error: BackendError) -> str:
        if error.code == PG_UNDEFINED_TABLE:
            return MSG_TABLAS_FALTANTES
        return error.message or MSG_REGISTRO_ERROR

    def register(self, *, nombre: str, telefono: str, now: datetime | None = None) -> str:
        """Persist a new registro and return the success message.

        The audit log row is best-effort: its failure is logged and never
        reaches the user.
        """
        nombre = require_non_empty(nombre, "Nombre Completo")
        telefono = require_non_empty(telefono, "Teléfono")

        try:
            self._registros.create(nombre=nombre, telefono=telefono)
        except BackendError as e:
            logger.error("Error al guardar: %s (code=%s)", e.message, e.code)
            raise BackendError(self.describe_save_error(e), code=e.code) from e

        try:
            self._logs.add(LogRegistro(accion=LOG_ACCION_NUEVO_REGISTRO, fecha_registro=now or now_utc()))
        except BackendError as e:
            logger.error("Error guardando log: %s (code=%s)", e.message, e.code)
        except Exception:
            # The registro is already saved; never report this as a failed registration.
            logger.exception("Error guardando log")

        return MSG_REGISTRO_OK

    def list_registros(self) -> Sequence[Registro]:
        try:
            return self._registros.list_recent_first()
        except BackendError as e:
            logger.error("Error al obtener registros: %s (code=%s)", e.message, e.code)
            raise BackendError(e.message or MSG_LISTA_ERROR, code=e.code) from e
