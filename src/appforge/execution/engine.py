"""Sequential replay of command and file plans against a session.

Each plan runs one step at a time. The first failed step is recorded and
ends the plan; later steps are neither run nor reported.
"""

from collections.abc import Awaitable, Callable, Iterable

import structlog

from appforge.logging import bind_session
from appforge.models.execution import ExecutionResult
from appforge.models.session import ProjectSession

from .backend import ExecutionBackend, SimulatedBackend

logger = structlog.get_logger(__name__)


class ExecutionEngine:
    """Replays plans through a pluggable backend."""

    def __init__(self, backend: ExecutionBackend | None = None):
        self.backend = backend or SimulatedBackend()

    async def execute_command(self, command: str, session: ProjectSession) -> ExecutionResult:
        bind_session(session.id)
        try:
            output = await self.backend.run_command(command, session)
        except Exception as e:
            logger.error("command_failed", command=command, error=str(e))
            return ExecutionResult.failed(str(e) or type(e).__name__)

        logger.info("command_executed", command=command)
        return ExecutionResult.ok(output)

    async def execute_commands(
        self, commands: Iterable[str], session: ProjectSession
    ) -> list[ExecutionResult]:
        steps = [
            (command, lambda command=command: self.execute_command(command, session))
            for command in commands
        ]
        return await self._replay(steps, session, plan="commands")

    async def create_file(
        self, session: ProjectSession, path: str, content: str
    ) -> ExecutionResult:
        bind_session(session.id)
        try:
            output = await self.backend.write_file(session, path, content)
        except Exception as e:
            logger.error("file_create_failed", path=path, error=str(e))
            return ExecutionResult.failed(str(e) or type(e).__name__)

        logger.info("file_created", path=path, size=len(content.encode("utf-8")))
        return ExecutionResult.ok(output)

    async def create_files(
        self, session: ProjectSession, files: dict[str, str]
    ) -> list[ExecutionResult]:
        """Write ``files`` in the dict's insertion order."""
        steps = [
            (path, lambda path=path, content=content: self.create_file(session, path, content))
            for path, content in files.items()
        ]
        return await self._replay(steps, session, plan="files")

    async def _replay(
        self,
        steps: list[tuple[str, Callable[[], Awaitable[ExecutionResult]]]],
        session: ProjectSession,
        plan: str,
    ) -> list[ExecutionResult]:
        results: list[ExecutionResult] = []
        for position, (label, run) in enumerate(steps):
            result = await run()
            results.append(result)
            if not result.success:
                logger.warning(
                    "plan_halted",
                    session_id=session.id,
                    plan=plan,
                    step=label,
                    position=position,
                    skipped=len(steps) - position - 1,
                    error=result.error,
                )
                break

        logger.info(
            "plan_replayed",
            session_id=session.id,
            plan=plan,
            steps=len(steps),
            executed=len(results),
        )
        return results
