"""Builds the path -> content map of source files for a project session.

Paths are POSIX-style and relative to the session's working path; the
first segment is the project (or backend) directory.
"""

from collections.abc import Callable

import structlog

from appforge.models.project import ProjectConfig
from appforge.models.session import ProjectSession
from appforge.templates import express, nextjs, react, tailwind

logger = structlog.get_logger(__name__)

SectionGenerator = Callable[[ProjectConfig], dict[str, str]]


def _jsx_ext(config: ProjectConfig) -> str:
    return "tsx" if config.is_typescript else "jsx"


def _script_ext(config: ProjectConfig) -> str:
    return "ts" if config.is_typescript else "js"


def _react_files(config: ProjectConfig) -> dict[str, str]:
    root, ext, lang = config.name, _jsx_ext(config), config.language
    files = {
        f"{root}/src/App.{ext}": react.render_app(lang),
        f"{root}/src/components/Home.{ext}": react.HOME,
        f"{root}/src/components/About.{ext}": react.ABOUT,
        f"{root}/src/components/Navbar.{ext}": react.render_navbar(lang),
    }
    if config.frontend.styling == "tailwind":
        files[f"{root}/tailwind.config.js"] = tailwind.CONFIG
        files[f"{root}/src/index.css"] = tailwind.GLOBAL_CSS
    return files


def _nextjs_files(config: ProjectConfig) -> dict[str, str]:
    root, ext = config.name, _jsx_ext(config)
    files = {
        f"{root}/src/app/layout.{ext}": nextjs.render_layout(
            config.language, config.name, config.description
        ),
        f"{root}/src/app/page.{ext}": nextjs.PAGE,
        f"{root}/src/app/about/page.{ext}": nextjs.ABOUT_PAGE,
        f"{root}/src/components/Navbar.{ext}": nextjs.NAVBAR,
    }
    if config.has_feature("api"):
        files[f"{root}/src/app/api/hello/route.{_script_ext(config)}"] = nextjs.API_ROUTE
    return files


def _express_files(config: ProjectConfig) -> dict[str, str]:
    root, ext, lang = config.backend_dir, _script_ext(config), config.language
    files = {
        f"{root}/src/index.{ext}": express.render_server(lang),
        f"{root}/src/routes/index.{ext}": express.render_routes(lang),
        f"{root}/src/controllers/index.{ext}": express.render_controllers(lang),
        f"{root}/.env": express.ENV_FILE,
        f"{root}/.gitignore": express.GITIGNORE,
    }
    if config.is_typescript:
        files[f"{root}/tsconfig.json"] = express.render_tsconfig()
    files[f"{root}/package.json"] = express.render_package_json(
        root, lang, config.description
    )
    return files


FRONTEND_GENERATORS: dict[str, SectionGenerator] = {
    "react": _react_files,
    "nextjs": _nextjs_files,
}

BACKEND_GENERATORS: dict[str, SectionGenerator] = {
    "express": _express_files,
}


class FileTreeGenerator:
    """Generates the source files of a scaffolded project.

    Iteration order of the returned dict is the order files should be
    written in: frontend first, then backend, each in template order.
    """

    @classmethod
    def generate_file_structure(cls, session: ProjectSession) -> dict[str, str]:
        config = session.config
        files: dict[str, str] = {}

        if config.kind.has_frontend:
            generator = FRONTEND_GENERATORS.get(config.frontend.framework)
            if generator:
                files.update(generator(config))
            else:
                logger.debug(
                    "file_section_unhandled", section="frontend", choice=config.frontend.framework
                )

        if config.kind.has_backend:
            generator = BACKEND_GENERATORS.get(config.backend.framework)
            if generator:
                files.update(generator(config))
            else:
                logger.debug(
                    "file_section_unhandled", section="backend", choice=config.backend.framework
                )

        return files
