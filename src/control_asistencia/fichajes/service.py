from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import now_utc
from ..common.validators import require_int
from ..core.constants import MSG_FICHAJE_ERROR
from ..core.enums import FichajeTipo
from ..core.exceptions import BackendError, ValidationError
from .model import Fichaje
from .repository import FichajeRepository

logger = logging.getLogger(__name__)


class FichajeService:
    """Use case: log an entry/exit event for a registro."""

    def __init__(self, fichajes: FichajeRepository):
        self._fichajes = fichajes

    @staticmethod
    def parse_tipo(value) -> FichajeTipo:
        if isinstance(value, FichajeTipo):
            return value
        try:
            return FichajeTipo(str(value or "").strip().upper())
        except ValueError:
            raise ValidationError("Tipo de fichaje no válido")

    @classmethod
    def failure_message(cls, tipo, detail) -> str:
        """Message for a failed fichaje; generic when `tipo` itself is unusable."""
        try:
            tipo = cls.parse_tipo(tipo)
        except ValidationError:
            return MSG_FICHAJE_ERROR
        return f"❌ Error al registrar {tipo.value.lower()}: {detail}"

    def fichar(self, *, usuario_id, nombre: str, tipo, now: datetime | None = None) -> str:
        usuario_id = require_int(usuario_id, "Usuario")
        tipo = self.parse_tipo(tipo)

        try:
            self._fichajes.add(Fichaje(usuario_id=usuario_id, tipo=tipo, fecha_evento=now or now_utc()))
        except BackendError as e:
            logger.error("Error al fichar: %s (code=%s)", e.message, e.code)
            raise BackendError(self.failure_message(tipo, e.message), code=e.code) from e

        return f"✅ {tipo.label} registrada correctamente para {nombre}"
