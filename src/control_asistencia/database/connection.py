from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client

from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)


@dataclass
class SupabaseConfig:
    url: str
    key: str


class SupabaseConnection:
    """Singleton-like Supabase client factory.

    Note: The client is created on first use, so building the app does not
    need the backend to be reachable (or even configured).
    """

    _instance: Optional["SupabaseConnection"] = None

    def __init__(self, config: SupabaseConfig):
        self._config = config
        self._client: Optional[Client] = None

    @classmethod
    def get_instance(cls, config: SupabaseConfig) -> "SupabaseConnection":
        if cls._instance is None:
            cls._instance = SupabaseConnection(config)
        return cls._instance

    @property
    def url(self) -> str:
        return self._config.url

    def client(self) -> Client:
        if self._client is None:
            if not self._config.url or not self._config.key:
                raise BackendError("Supabase no está configurado (SUPABASE_URL / SUPABASE_KEY)")
            logger.debug("Creating Supabase client for %s", self._config.url)
            self._client = create_client(self._config.url, self._config.key)
        return self._client
