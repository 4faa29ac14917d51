import uuid

import structlog

from appforge.models.project import ProjectConfig
from appforge.models.session import ProjectSession

from .store import SessionStore

logger = structlog.get_logger(__name__)


class SessionManager:
    """Mints sessions and records them in an injected store."""

    def __init__(self, store: SessionStore, base_path: str = "/private/tmp/term-users/"):
        self.store = store
        self.base_path = base_path if base_path.endswith("/") else f"{base_path}/"

    def working_path_for(self, session_id: str) -> str:
        """Working directory of a session; depends on the id alone."""
        return f"{self.base_path}{session_id}/"

    async def create_session(self, config: ProjectConfig) -> ProjectSession:
        """Create and register a session for ``config``.

        Ids are random UUID4 values, so concurrent callers never collide.
        """
        session_id = str(uuid.uuid4())
        session = ProjectSession(
            id=session_id,
            config=config,
            working_path=self.working_path_for(session_id),
        )
        await self.store.add(session)

        logger.info(
            "session_created",
            session_id=session_id,
            project=config.name,
            kind=config.kind.value,
            working_path=session.working_path,
        )
        return session

    async def get_session(self, session_id: str) -> ProjectSession | None:
        return await self.store.get(session_id)

    async def list_sessions(self) -> list[ProjectSession]:
        """Snapshot of every registered session."""
        return await self.store.all()

    async def close(self) -> None:
        await self.store.close()
