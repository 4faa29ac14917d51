from .manager import SessionManager
from .store import (
    InMemorySessionStore,
    RedisSessionStore,
    SessionStore,
    SessionStoreError,
    build_session_store,
)

__all__ = [
    "InMemorySessionStore",
    "RedisSessionStore",
    "SessionManager",
    "SessionStore",
    "SessionStoreError",
    "build_session_store",
]
