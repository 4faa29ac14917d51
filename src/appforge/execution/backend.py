import asyncio
from dataclasses import dataclass, field
from typing import Protocol

from appforge.models.session import ProjectSession

from .classifier import CommandClassifier


class ExecutionBackend(Protocol):
    """Protocol for whatever actually carries out commands and file writes.

    Implementations return the output text of a step and signal failure by
    raising; the engine turns both into ``ExecutionResult`` values.
    """

    async def run_command(self, command: str, session: ProjectSession) -> str:
        """Run one shell command inside the session's working directory."""
        ...

    async def write_file(self, session: ProjectSession, path: str, content: str) -> str:
        """Write one file relative to the session's working directory."""
        ...


@dataclass
class SimulatedBackend(ExecutionBackend):
    """Backend that only pretends: it waits a little and describes the step."""

    classifier: CommandClassifier = field(default_factory=CommandClassifier)
    command_delay: float = 0.5
    file_delay: float = 0.2

    async def run_command(self, command: str, session: ProjectSession) -> str:
        await asyncio.sleep(self.command_delay)
        return self.classifier.describe(command)

    async def write_file(self, session: ProjectSession, path: str, content: str) -> str:
        await asyncio.sleep(self.file_delay)
        return f"Created file: {path}"
