"""Postgres connection pool."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool


def conninfo_from_config(config: Dict[str, Any]) -> str:
    """Build a libpq connection string from a postgres config dict."""
    password = config.get("password") or ""
    password_env = config.get("password_env")
    if password_env and os.environ.get(password_env):
        password = os.environ[password_env]

    return make_conninfo(
        host=config.get("host", "localhost"),
        port=config.get("port", 5432),
        dbname=config.get("database", "newsdesk"),
        user=config.get("user", "newsdesk_user"),
        password=password,
    )


_connection_pool: Optional[ConnectionPool] = None


def get_connection_pool(config: Dict[str, Any]) -> ConnectionPool:
    """Get or create the process-wide connection pool."""
    global _connection_pool
    if _connection_pool is None:
        _connection_pool = ConnectionPool(
            conninfo_from_config(config),
            min_size=config.get("pool_min_size", 1),
            max_size=config.get("pool_max_size", 10),
            kwargs={"row_factory": dict_row},
            open=True,
        )
    return _connection_pool


def close_connection_pool() -> None:
    global _connection_pool
    if _connection_pool is not None:
        _connection_pool.close()
        _connection_pool = None


@contextmanager
def get_connection(config: Dict[str, Any]) -> Generator[psycopg.Connection, None, None]:
    """Borrow a dict-row connection from the pool."""
    pool = get_connection_pool(config)
    with pool.connection() as conn:
        yield conn
