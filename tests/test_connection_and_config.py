from __future__ import annotations

import logging

import pytest

from control_asistencia import container as container_module
from control_asistencia.config import get_settings_module
from control_asistencia.core.exceptions import BackendError
from control_asistencia.database import connection as connection_module
from control_asistencia.database.connection import SupabaseConfig, SupabaseConnection


@pytest.fixture(autouse=True)
def reset_connection_singleton(monkeypatch):
    monkeypatch.setattr(SupabaseConnection, "_instance", None)


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "control_asistencia.config.production"),
        ("PROD", "control_asistencia.config.production"),
        ("testing", "control_asistencia.config.testing"),
        ("test", "control_asistencia.config.testing"),
        ("anything", "control_asistencia.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "control_asistencia.config.development"


def test_client_is_created_once_and_lazily(monkeypatch):
    created = []

    def fake_create_client(url, key):
        created.append((url, key))
        return object()

    monkeypatch.setattr(connection_module, "create_client", fake_create_client)
    conn = SupabaseConnection(SupabaseConfig(url="https://demo.supabase.co", key="anon"))

    assert created == []
    first = conn.client()
    second = conn.client()

    assert first is second
    assert created == [("https://demo.supabase.co", "anon")]


def test_missing_config_raises_backend_error():
    conn = SupabaseConnection(SupabaseConfig(url="", key=""))

    with pytest.raises(BackendError):
        conn.client()


def test_build_container_shares_one_connection():
    c = container_module.build_container(supabase_config={"url": "https://demo.supabase.co", "key": "anon"})

    assert c.conn is SupabaseConnection.get_instance(SupabaseConfig(url="other", key="other"))
    assert c.conn.url == "https://demo.supabase.co"


def test_debug_startup_log_reports_connection_url(monkeypatch, caplog):
    from control_asistencia.container import Container
    from control_asistencia.main import create_app

    monkeypatch.setenv("APP_ENV", "development")
    caplog.set_level(logging.INFO, logger="control_asistencia.main")
    conn = SupabaseConnection(SupabaseConfig(url="https://demo.supabase.co", key="anon"))
    container = Container(
        conn=conn,
        registros_repo=None,
        fichajes_repo=None,
        logs_repo=None,
        registro_service=None,
        fichaje_service=None,
    )

    create_app(container=container)

    assert "supabase=https://demo.supabase.co" in caplog.text
