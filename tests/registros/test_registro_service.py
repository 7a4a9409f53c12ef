from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from control_asistencia.core.constants import (
    LOG_ACCION_NUEVO_REGISTRO,
    MSG_LISTA_ERROR,
    MSG_REGISTRO_ERROR,
    MSG_REGISTRO_OK,
    MSG_TABLAS_FALTANTES,
)
from control_asistencia.core.exceptions import BackendError, ValidationError
from control_asistencia.logs.model import LogRegistro
from control_asistencia.registros.model import Registro
from control_asistencia.registros.service import RegistroService


class InMemoryRegistros:
    def __init__(self, error: Optional[BackendError] = None):
        self.rows: list[Registro] = []
        self._error = error
        self._id = 0

    def create(self, *, nombre: str, telefono: str) -> None:
        if self._error:
            raise self._error
        self._id += 1
        self.rows.append(
            Registro(
                id=self._id,
                created_at=datetime(2026, 3, 1, 9, 0, self._id, tzinfo=timezone.utc),
                nombre=nombre,
                telefono=telefono,
            )
        )

    def list_recent_first(self):
        if self._error:
            raise self._error
        return sorted(self.rows, key=lambda r: r.created_at, reverse=True)


class InMemoryLogs:
    def __init__(self, error: Optional[BackendError] = None):
        self.entries: list[LogRegistro] = []
        self._error = error

    def add(self, entry: LogRegistro) -> None:
        if self._error:
            raise self._error
        self.entries.append(entry)


def test_register_saves_registro_and_log():
    registros, logs = InMemoryRegistros(), InMemoryLogs()
    svc = RegistroService(registros, logs)
    now = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)

    msg = svc.register(nombre="  María García ", telefono="+34 600 000 000", now=now)

    assert msg == MSG_REGISTRO_OK
    assert registros.rows[0].nombre == "María García"
    assert registros.rows[0].telefono == "+34 600 000 000"
    assert logs.entries == [LogRegistro(accion=LOG_ACCION_NUEVO_REGISTRO, fecha_registro=now)]


@pytest.mark.parametrize("nombre, telefono", [("", "600"), ("   ", "600"), ("Ana", ""), ("Ana", "  ")])
def test_register_requires_nombre_and_telefono(nombre, telefono):
    registros, logs = InMemoryRegistros(), InMemoryLogs()
    svc = RegistroService(registros, logs)

    with pytest.raises(ValidationError):
        svc.register(nombre=nombre, telefono=telefono)

    assert registros.rows == []
    assert logs.entries == []


def test_missing_tables_error_gets_hint_message():
    err = BackendError('relation "public.registros" does not exist', code="42P01")
    svc = RegistroService(InMemoryRegistros(error=err), InMemoryLogs())

    with pytest.raises(BackendError) as exc_info:
        svc.register(nombre="Ana", telefono="600")

    assert str(exc_info.value) == MSG_TABLAS_FALTANTES
    assert exc_info.value.code == "42P01"


def test_backend_message_is_shown_as_is():
    err = BackendError("duplicate key value violates unique constraint", code="23505")
    svc = RegistroService(InMemoryRegistros(error=err), InMemoryLogs())

    with pytest.raises(BackendError) as exc_info:
        svc.register(nombre="Ana", telefono="600")

    assert str(exc_info.value) == "duplicate key value violates unique constraint"


def test_empty_backend_message_falls_back_to_default():
    svc = RegistroService(InMemoryRegistros(error=BackendError("")), InMemoryLogs())

    with pytest.raises(BackendError) as exc_info:
        svc.register(nombre="Ana", telefono="600")

    assert str(exc_info.value) == MSG_REGISTRO_ERROR


def test_log_failure_does_not_fail_registration(caplog):
    registros = InMemoryRegistros()
    svc = RegistroService(registros, InMemoryLogs(error=BackendError("permission denied", code="42501")))

    msg = svc.register(nombre="Ana", telefono="600")

    assert msg == MSG_REGISTRO_OK
    assert len(registros.rows) == 1
    assert "Error guardando log" in caplog.text


def test_list_returns_most_recent_first():
    registros = InMemoryRegistros()
    svc = RegistroService(registros, InMemoryLogs())
    svc.register(nombre="Primero", telefono="1")
    svc.register(nombre="Segundo", telefono="2")

    names = [r.nombre for r in svc.list_registros()]

    assert names == ["Segundo", "Primero"]


def test_list_error_falls_back_to_default_message():
    svc = RegistroService(InMemoryRegistros(error=BackendError("")), InMemoryLogs())

    with pytest.raises(BackendError) as exc_info:
        svc.list_registros()

    assert str(exc_info.value) == MSG_LISTA_ERROR


class BrokenLogs:
    def add(self, entry: LogRegistro) -> None:
        raise ValueError("unexpected response payload")


def test_unexpected_log_error_does_not_fail_registration(caplog):
    registros = InMemoryRegistros()
    svc = RegistroService(registros, BrokenLogs())

    msg = svc.register(nombre="Ana", telefono="600")

    assert msg == MSG_REGISTRO_OK
    assert [r.nombre for r in registros.rows] == ["Ana"]
    assert "Error guardando log" in caplog.text
