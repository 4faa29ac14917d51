"""Project configuration models.

A ``ProjectConfig`` describes the project a user wants scaffolded. It is
validated once, up front, so planning never discovers a malformed config
halfway through a plan.
"""

from enum import Enum
import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class ProjectKind(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"

    @property
    def has_frontend(self) -> bool:
        return self in (ProjectKind.FRONTEND, ProjectKind.FULLSTACK)

    @property
    def has_backend(self) -> bool:
        return self in (ProjectKind.BACKEND, ProjectKind.FULLSTACK)


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


FrontendFramework = Literal["react", "nextjs", "vue", "angular", "svelte", "vanilla"]
Styling = Literal["css", "scss", "tailwind", "bootstrap"]
BackendFramework = Literal["express", "nest", "fastify", "koa", "hapi"]
Database = Literal["mongodb", "postgres", "mysql", "sqlite", "supabase", "none"]


class ProjectConfigError(ValueError):
    """Raised when a project configuration document is malformed."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class FrontendConfig(BaseModel):
    """Frontend part of a project."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    framework: FrontendFramework
    styling: Styling = "css"
    features: frozenset[str] = Field(default_factory=frozenset)


class BackendConfig(BaseModel):
    """Backend part of a project."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    framework: BackendFramework
    database: Database | None = None


class ProjectConfig(BaseModel):
    """User supplied description of the project to scaffold.

    ``frontend`` is present exactly when ``kind`` is frontend or fullstack,
    ``backend`` exactly when ``kind`` is backend or fullstack.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    kind: ProjectKind = Field(..., alias="type")
    language: Language
    name: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
    frontend: FrontendConfig | None = None
    backend: BackendConfig | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _check_sections(self) -> "ProjectConfig":
        if self.kind.has_frontend != (self.frontend is not None):
            state = "requires" if self.kind.has_frontend else "must not define"
            raise ValueError(f"project kind '{self.kind.value}' {state} a 'frontend' section")
        if self.kind.has_backend != (self.backend is not None):
            state = "requires" if self.kind.has_backend else "must not define"
            raise ValueError(f"project kind '{self.kind.value}' {state} a 'backend' section")
        return self

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def backend_dir(self) -> str:
        """Directory holding the backend; suffixed when it sits beside a frontend."""
        if self.kind is ProjectKind.FULLSTACK:
            return f"{self.name}-backend"
        return self.name

    def has_feature(self, feature: str) -> bool:
        return self.frontend is not None and feature in self.frontend.features

    @classmethod
    def from_file(cls, path: str | Path) -> "ProjectConfig":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ProjectConfigError(f"{path}: invalid JSON: {e}") from e
        return load_project_config(data)


def load_project_config(data: dict[str, Any]) -> ProjectConfig:
    """Validate a raw mapping into a ``ProjectConfig``.

    Raises:
        ProjectConfigError: the mapping does not describe a valid project.
    """
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ProjectConfigError("Invalid project configuration", errors) from e
