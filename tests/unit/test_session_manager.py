import asyncio
from unittest.mock import AsyncMock

from factories import backend_config, frontend_config, session_for
from fakeredis import FakeAsyncRedis
import pytest

from appforge.config import AppForgeSettings
from appforge.sessions import (
    InMemorySessionStore,
    RedisSessionStore,
    SessionManager,
    SessionStoreError,
    build_session_store,
)


@pytest.fixture
def fake_redis():
    return FakeAsyncRedis()


class TestSessionManager:
    @pytest.mark.asyncio
    async def test_create_session_registers_and_returns_session(self, session_manager):
        config = frontend_config()

        session = await session_manager.create_session(config)

        uuid_length = 36
        assert len(session.id) == uuid_length
        assert session.config == config
        assert session.working_path == f"/private/tmp/term-users/{session.id}/"
        assert await session_manager.get_session(session.id) == session

    @pytest.mark.asyncio
    async def test_ids_and_paths_are_unique_for_identical_configs(self, session_manager):
        config = backend_config()

        sessions = [await session_manager.create_session(config) for _ in range(25)]

        assert len({s.id for s in sessions}) == len(sessions)
        assert len({s.working_path for s in sessions}) == len(sessions)

    @pytest.mark.asyncio
    async def test_concurrent_creation_does_not_collide(self, session_manager):
        config = frontend_config()

        sessions = await asyncio.gather(
            *(session_manager.create_session(config) for _ in range(50))
        )

        assert len({s.id for s in sessions}) == len(sessions)
        assert len(await session_manager.list_sessions()) == len(sessions)

    @pytest.mark.asyncio
    async def test_working_path_ignores_project_name(self, session_manager):
        session = await session_manager.create_session(frontend_config(name="shop"))
        assert "shop" not in session.working_path

    @pytest.mark.asyncio
    async def test_get_unknown_session_returns_none(self, session_manager):
        assert await session_manager.get_session("missing") is None

    @pytest.mark.asyncio
    async def test_list_sessions_returns_every_session(self, session_manager):
        first = await session_manager.create_session(frontend_config())
        second = await session_manager.create_session(backend_config())

        listed = await session_manager.list_sessions()

        assert {s.id for s in listed} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_registries_are_independent(self):
        first = SessionManager(InMemorySessionStore())
        second = SessionManager(InMemorySessionStore())

        session = await first.create_session(frontend_config())

        assert await second.get_session(session.id) is None
        assert await second.list_sessions() == []

    def test_base_path_gets_trailing_slash(self):
        manager = SessionManager(InMemorySessionStore(), "/srv/sessions")
        assert manager.working_path_for("abc") == "/srv/sessions/abc/"


class TestInMemorySessionStore:
    @pytest.mark.asyncio
    async def test_refuses_duplicate_ids(self):
        store = InMemorySessionStore()
        session = session_for(frontend_config())
        await store.add(session)

        with pytest.raises(SessionStoreError):
            await store.add(session)


class TestRedisSessionStore:
    @pytest.mark.asyncio
    async def test_round_trips_sessions(self, fake_redis):
        store = RedisSessionStore(fake_redis)
        manager = SessionManager(store)
        config = frontend_config("nextjs", frontend={"features": ["api"]})

        session = await manager.create_session(config)
        loaded = await manager.get_session(session.id)

        assert loaded == session
        assert loaded.config.frontend.features == frozenset({"api"})

    @pytest.mark.asyncio
    async def test_stores_sessions_in_hash(self, fake_redis):
        manager = SessionManager(RedisSessionStore(fake_redis, key="test:sessions"))

        session = await manager.create_session(backend_config())

        assert await fake_redis.hexists("test:sessions", session.id)

    @pytest.mark.asyncio
    async def test_first_write_wins(self, fake_redis):
        store = RedisSessionStore(fake_redis)
        session = session_for(backend_config())
        await store.add(session)

        with pytest.raises(SessionStoreError):
            await store.add(session_for(frontend_config()))

        assert (await store.get(session.id)).config.kind.value == "backend"

    @pytest.mark.asyncio
    async def test_lists_all_sessions(self, fake_redis):
        manager = SessionManager(RedisSessionStore(fake_redis))
        created = [await manager.create_session(frontend_config()) for _ in range(3)]

        listed = await manager.list_sessions()

        assert {s.id for s in listed} == {s.id for s in created}

    @pytest.mark.asyncio
    async def test_missing_session_is_none(self, fake_redis):
        assert await RedisSessionStore(fake_redis).get("nope") is None

    @pytest.mark.asyncio
    async def test_close_releases_connection(self):
        redis_client = AsyncMock()
        manager = SessionManager(RedisSessionStore(redis_client))

        await manager.close()

        redis_client.aclose.assert_awaited_once()


class TestBuildSessionStore:
    def test_defaults_to_memory(self):
        store = build_session_store(AppForgeSettings(session_store="memory"))
        assert isinstance(store, InMemorySessionStore)

    def test_redis_store_from_settings(self):
        settings = AppForgeSettings(session_store="redis", redis_url="redis://localhost:6379/0")
        store = build_session_store(settings)
        assert isinstance(store, RedisSessionStore)
