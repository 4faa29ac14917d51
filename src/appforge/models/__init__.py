from .execution import ExecutionResult
from .project import (
    BackendConfig,
    FrontendConfig,
    Language,
    ProjectConfig,
    ProjectConfigError,
    ProjectKind,
    load_project_config,
)
from .session import ProjectSession

__all__ = [
    "BackendConfig",
    "ExecutionResult",
    "FrontendConfig",
    "Language",
    "ProjectConfig",
    "ProjectConfigError",
    "ProjectKind",
    "ProjectSession",
    "load_project_config",
]
