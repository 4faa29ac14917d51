import asyncio
from typing import Any, Protocol

import structlog

from appforge.config import AppForgeSettings
from appforge.models.session import ProjectSession

logger = structlog.get_logger(__name__)


class SessionStoreError(Exception):
    """Raised when a session cannot be recorded."""

    pass


class SessionStore(Protocol):
    """Registry of sessions keyed by id. Entries are never replaced."""

    async def add(self, session: ProjectSession) -> None: ...
    async def get(self, session_id: str) -> ProjectSession | None: ...
    async def all(self) -> list[ProjectSession]: ...
    async def close(self) -> None: ...


class InMemorySessionStore:
    """Process-local registry; each instance is independent."""

    def __init__(self) -> None:
        self._sessions: dict[str, ProjectSession] = {}
        self._lock = asyncio.Lock()

    async def add(self, session: ProjectSession) -> None:
        async with self._lock:
            if session.id in self._sessions:
                raise SessionStoreError(f"Session {session.id} already exists")
            self._sessions[session.id] = session

    async def get(self, session_id: str) -> ProjectSession | None:
        return self._sessions.get(session_id)

    async def all(self) -> list[ProjectSession]:
        return list(self._sessions.values())

    async def close(self) -> None:
        pass


# Protocol for the Redis client so both redis.asyncio.Redis and FakeAsyncRedis fit
class AsyncRedisHashClient(Protocol):
    async def hsetnx(self, name: str, key: str, value: Any) -> Any: ...
    async def hget(self, name: str, key: str) -> Any: ...
    async def hvals(self, name: str) -> list[Any]: ...
    async def aclose(self) -> None: ...


class RedisSessionStore:
    """Registry kept in a Redis hash so several processes share it.

    Insertion uses HSETNX, so the first write for an id wins and a second
    one is refused instead of overwriting.
    """

    def __init__(self, redis: AsyncRedisHashClient, key: str = "appforge:sessions"):
        self.redis = redis
        self._key = key

    async def add(self, session: ProjectSession) -> None:
        created = await self.redis.hsetnx(self._key, session.id, session.model_dump_json())
        if not created:
            raise SessionStoreError(f"Session {session.id} already exists")

    async def get(self, session_id: str) -> ProjectSession | None:
        raw = await self.redis.hget(self._key, session_id)
        if raw is None:
            return None
        return self._decode(raw)

    async def all(self) -> list[ProjectSession]:
        return [self._decode(raw) for raw in await self.redis.hvals(self._key)]

    async def close(self) -> None:
        """Close the underlying Redis connection."""
        await self.redis.aclose()
        logger.info("redis_connection_closed")

    @staticmethod
    def _decode(raw: str | bytes) -> ProjectSession:
        if isinstance(raw, bytes):
            raw = raw.decode()
        return ProjectSession.model_validate_json(raw)


def build_session_store(settings: AppForgeSettings) -> SessionStore:
    """Pick the registry backend named in settings."""
    if settings.session_store == "redis":
        import redis.asyncio as redis

        logger.info("session_store_selected", store="redis")
        return RedisSessionStore(redis.from_url(settings.redis_url, decode_responses=True))
    logger.info("session_store_selected", store="memory")
    return InMemorySessionStore()
