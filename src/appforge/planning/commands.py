"""Compiles a project session into the ordered shell commands that scaffold it."""

from collections.abc import Callable
import shlex

import structlog

from appforge.models.project import ProjectConfig
from appforge.models.session import ProjectSession
from appforge.templates import tailwind

logger = structlog.get_logger(__name__)

SectionPlanner = Callable[[ProjectConfig], list[str]]

TSC_INIT = (
    "npx tsc --init --target es6 --module commonjs --outDir ./dist --strict true "
    "--esModuleInterop true --skipLibCheck true --forceConsistentCasingInFileNames true"
)


def overwrite_file(path: str, content: str) -> str:
    """Shell command replacing ``path`` with ``content``."""
    return f"echo {shlex.quote(content)} > {path}"


# === Frontend sections ===


def _plan_react(config: ProjectConfig) -> list[str]:
    if config.is_typescript:
        commands = [f"npx create-react-app {config.name} --template typescript"]
    else:
        commands = [f"npx create-react-app {config.name}"]

    if config.frontend.styling == "tailwind":
        # init writes a stock config that the two echo commands then replace
        commands += [
            f"cd {config.name}",
            "npm install -D tailwindcss postcss autoprefixer",
            "npx tailwindcss init -p",
            overwrite_file("tailwind.config.js", tailwind.CONFIG),
            overwrite_file("./src/index.css", tailwind.GLOBAL_CSS),
        ]
    return commands


def _plan_nextjs(config: ProjectConfig) -> list[str]:
    flags = "--tailwind --eslint --app --src-dir"
    if config.is_typescript:
        flags = f"--typescript {flags}"
    commands = [f"npx create-next-app@latest {config.name} {flags}"]

    if config.has_feature("auth"):
        commands += [f"cd {config.name}", "npm install next-auth"]
    if config.has_feature("api"):
        commands += [f"cd {config.name}", "mkdir -p src/app/api"]
    return commands


def _plan_vue(config: ProjectConfig) -> list[str]:
    create = f"vue create {config.name} -d"
    if config.is_typescript:
        create += " -p typescript"
    return ["npm install -g @vue/cli", create]


def _plan_svelte(config: ProjectConfig) -> list[str]:
    commands = [
        f"npx degit sveltejs/template {config.name}",
        f"cd {config.name}",
        "npm install",
    ]
    if config.is_typescript:
        commands.append("node scripts/setupTypeScript.js")
    return commands


# === Backend sections ===


def _plan_express(config: ProjectConfig) -> list[str]:
    commands = ["npm install express cors dotenv"]
    if config.is_typescript:
        commands += [
            "npm install -D typescript @types/express @types/node @types/cors ts-node-dev",
            TSC_INIT,
        ]
    else:
        commands.append("npm install -D nodemon")
    commands += [
        "mkdir -p src/routes",
        "mkdir -p src/controllers",
        "mkdir -p src/models",
    ]
    return commands


def _plan_nest(config: ProjectConfig) -> list[str]:
    # The nest CLI only scaffolds TypeScript projects
    if not config.is_typescript:
        return []
    return [
        "npm i -g @nestjs/cli",
        f"nest new {config.backend_dir} --package-manager npm",
    ]


# === Database sections ===


def _plan_mongodb(config: ProjectConfig) -> list[str]:
    commands = ["npm install mongoose"]
    if config.is_typescript:
        commands.append("npm install -D @types/mongoose")
    return commands


def _plan_postgres(config: ProjectConfig) -> list[str]:
    commands = ["npm install pg"]
    if config.is_typescript:
        commands.append("npm install -D @types/pg")
    return commands


def _plan_supabase(config: ProjectConfig) -> list[str]:
    return ["npm install @supabase/supabase-js"]


FRONTEND_PLANNERS: dict[str, SectionPlanner] = {
    "react": _plan_react,
    "nextjs": _plan_nextjs,
    "vue": _plan_vue,
    "svelte": _plan_svelte,
}

BACKEND_PLANNERS: dict[str, SectionPlanner] = {
    "express": _plan_express,
    "nest": _plan_nest,
}

DATABASE_PLANNERS: dict[str, SectionPlanner] = {
    "mongodb": _plan_mongodb,
    "postgres": _plan_postgres,
    "supabase": _plan_supabase,
}


def _dispatch(
    table: dict[str, SectionPlanner], key: str, config: ProjectConfig, section: str
) -> list[str]:
    planner = table.get(key)
    if planner is None:
        logger.debug("plan_section_unhandled", section=section, choice=key)
        return []
    return planner(config)


class CommandPlanner:
    """Turns a session into its scaffolding command plan.

    The plan depends only on ``session.config`` and ``session.working_path``,
    so the same session always yields the same commands.
    """

    @classmethod
    def generate_init_commands(cls, session: ProjectSession) -> list[str]:
        config = session.config
        commands = [
            f"mkdir -p {session.working_path}",
            f"cd {session.working_path}",
        ]

        if config.kind.has_frontend:
            commands += _dispatch(
                FRONTEND_PLANNERS, config.frontend.framework, config, "frontend"
            )

        if config.kind.has_backend:
            backend = config.backend
            commands += [
                f"mkdir -p {config.backend_dir}",
                f"cd {config.backend_dir}",
                "npm init -y",
            ]
            commands += _dispatch(BACKEND_PLANNERS, backend.framework, config, "backend")
            if backend.database and backend.database != "none":
                commands += _dispatch(DATABASE_PLANNERS, backend.database, config, "database")

        return [cmd for cmd in commands if cmd.strip()]
