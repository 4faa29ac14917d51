from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .project import ProjectConfig


class ProjectSession(BaseModel):
    """An isolated workspace binding one project config to a working path."""

    model_config = ConfigDict(frozen=True)

    id: str
    config: ProjectConfig
    working_path: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
