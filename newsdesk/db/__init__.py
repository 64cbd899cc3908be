"""Database management for the news desk."""

from .clusters import ClusterStore
from .connection import (
    close_connection_pool,
    conninfo_from_config,
    get_connection,
    get_connection_pool,
)
from .init import init_database, validate_connection
from .prompts import PromptStore
from .sources import SourceStore
from .usage import UsageLogStore

__all__ = [
    "ClusterStore",
    "PromptStore",
    "SourceStore",
    "UsageLogStore",
    "close_connection_pool",
    "conninfo_from_config",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
