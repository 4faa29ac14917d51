"""End-to-end flows: config -> session -> plans -> replay, and prompt -> preview files."""

from dataclasses import dataclass, field

import structlog

from appforge.ai.demux import parse_code_into_files
from appforge.ai.gemini import GeminiClient
from appforge.execution.engine import ExecutionEngine
from appforge.logging import bind_session
from appforge.models.execution import ExecutionResult
from appforge.models.project import ProjectConfig
from appforge.models.session import ProjectSession
from appforge.planning.commands import CommandPlanner
from appforge.planning.files import FileTreeGenerator
from appforge.sessions.manager import SessionManager

logger = structlog.get_logger(__name__)


@dataclass
class ScaffoldReport:
    """Everything one scaffold run planned and did, in order."""

    session: ProjectSession
    commands: list[str]
    files: dict[str, str]
    command_results: list[ExecutionResult] = field(default_factory=list)
    file_results: list[ExecutionResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return (
            len(self.command_results) == len(self.commands)
            and len(self.file_results) == len(self.files)
            and all(r.success for r in self.command_results + self.file_results)
        )

    @property
    def failure(self) -> str | None:
        """Short message for the first failed step, if any."""
        for step, result in zip(self.commands, self.command_results, strict=False):
            if not result.success:
                return f"Command failed: {step}: {result.error}"
        for path, result in zip(self.files, self.file_results, strict=False):
            if not result.success:
                return f"File creation failed: {path}: {result.error}"
        return None


@dataclass
class PreviewResult:
    files: dict[str, str]
    error: str | None = None


class Scaffolder:
    """Drives a project from config to a replayed scaffold."""

    def __init__(self, session_manager: SessionManager, engine: ExecutionEngine):
        self.session_manager = session_manager
        self.engine = engine

    async def scaffold(self, config: ProjectConfig) -> ScaffoldReport:
        """Create a session, then replay its command plan and its file plan.

        Files are only written once every command has succeeded.
        """
        session = await self.session_manager.create_session(config)
        bind_session(session.id)

        report = ScaffoldReport(
            session=session,
            commands=CommandPlanner.generate_init_commands(session),
            files=FileTreeGenerator.generate_file_structure(session),
        )
        logger.info(
            "scaffold_planned",
            commands=len(report.commands),
            files=len(report.files),
        )

        report.command_results = await self.engine.execute_commands(report.commands, session)
        if report.failure is None:
            report.file_results = await self.engine.create_files(session, report.files)

        if report.success:
            logger.info("scaffold_complete", project=config.name)
        else:
            logger.error("scaffold_failed", project=config.name, failure=report.failure)
        return report


async def preview_from_prompt(prompt: str, client: GeminiClient) -> PreviewResult:
    """Ask the provider for a web app and split its code into preview files."""
    response = await client.generate_web_app(prompt)
    if not response.ok:
        return PreviewResult(files={}, error=response.error)
    if response.code is None:
        logger.info("preview_no_code", text_length=len(response.text))
        return PreviewResult(files={}, error="The provider reply contained no code")
    return PreviewResult(files=parse_code_into_files(response.code))
