from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

import httpx
from postgrest.exceptions import APIError

from ..core.exceptions import BackendError
from .connection import SupabaseConnection


@contextmanager
def table_query(conn_factory: SupabaseConnection, table: str) -> Iterator[Any]:
    """Yield a query builder for `table`.

    PostgREST errors and transport failures leave this block as BackendError.
    """
    try:
        yield conn_factory.client().table(table)
    except APIError as e:
        raise BackendError(e.message or str(e), code=e.code) from e
    except httpx.HTTPError as e:
        raise BackendError(str(e)) from e


def fetchall(response) -> List[Dict[str, Any]]:
    rows = getattr(response, "data", None)
    return list(rows or [])
