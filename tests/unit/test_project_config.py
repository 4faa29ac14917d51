import json

from factories import backend_config, frontend_config
from pydantic import ValidationError
import pytest

from appforge.models import Language, ProjectConfig, ProjectConfigError, ProjectKind
from appforge.models.project import load_project_config


class TestProjectConfig:
    def test_accepts_type_alias_for_kind(self):
        """Configs written with 'type' (as the UI sends them) validate too."""
        config = ProjectConfig.model_validate(
            {
                "type": "backend",
                "language": "javascript",
                "name": "svc",
                "backend": {"framework": "express"},
            }
        )
        assert config.kind is ProjectKind.BACKEND
        assert config.language is Language.JAVASCRIPT

    def test_frontend_kind_requires_frontend_section(self):
        with pytest.raises(ValidationError) as exc:
            ProjectConfig.model_validate(
                {"kind": "frontend", "language": "typescript", "name": "app"}
            )
        assert "requires a 'frontend' section" in str(exc.value)

    def test_backend_kind_rejects_frontend_section(self):
        with pytest.raises(ValidationError) as exc:
            ProjectConfig.model_validate(
                {
                    "kind": "backend",
                    "language": "typescript",
                    "name": "api",
                    "frontend": {"framework": "react"},
                    "backend": {"framework": "express"},
                }
            )
        assert "must not define a 'frontend' section" in str(exc.value)

    def test_fullstack_requires_both_sections(self):
        with pytest.raises(ValidationError):
            ProjectConfig.model_validate(
                {
                    "kind": "fullstack",
                    "language": "typescript",
                    "name": "app",
                    "frontend": {"framework": "react"},
                }
            )

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            frontend_config(name="")

    def test_rejects_unknown_framework(self):
        with pytest.raises(ValidationError):
            frontend_config(framework="ember")

    def test_backend_dir_suffixed_for_fullstack(self):
        config = ProjectConfig.model_validate(
            {
                "kind": "fullstack",
                "language": "javascript",
                "name": "shop",
                "frontend": {"framework": "react"},
                "backend": {"framework": "express"},
            }
        )
        assert config.backend_dir == "shop-backend"
        assert backend_config(name="shop").backend_dir == "shop"

    def test_features_are_a_set(self):
        config = frontend_config("nextjs", frontend={"features": ["api", "auth", "api"]})
        assert config.frontend.features == frozenset({"api", "auth"})
        assert config.has_feature("auth")
        assert not config.has_feature("i18n")

    def test_config_is_immutable(self):
        config = frontend_config()
        with pytest.raises(ValidationError):
            config.name = "other"


class TestLoadProjectConfig:
    def test_wraps_validation_errors(self):
        with pytest.raises(ProjectConfigError) as exc:
            load_project_config({"kind": "backend", "language": "typescript", "name": "x"})

        assert str(exc.value) == "Invalid project configuration"
        assert any("backend" in error for error in exc.value.errors)

    def test_from_file(self, tmp_path):
        path = tmp_path / "project.json"
        path.write_text(
            json.dumps(
                {
                    "kind": "frontend",
                    "language": "javascript",
                    "name": "site",
                    "frontend": {"framework": "svelte", "styling": "scss"},
                    "description": "Marketing site",
                }
            )
        )

        config = ProjectConfig.from_file(path)

        assert config.name == "site"
        assert config.frontend.framework == "svelte"
        assert config.description == "Marketing site"

    def test_from_file_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ProjectConfigError) as exc:
            ProjectConfig.from_file(path)
        assert "invalid JSON" in str(exc.value)
