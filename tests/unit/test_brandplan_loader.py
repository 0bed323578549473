"""Tests for brandplan.yaml loading and CSS output paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from brandplan.core.brandplan_loader import (
    get_config_path,
    get_css_output_path,
    load_brand_plan,
    load_brand_plan_data,
    write_default_config,
)
from brandplan.core.errors import BrandPlanValidationError, ConfigError
from brandplan.core.templates import CONFIG_TEMPLATE


class TestPaths:
    def test_config_path(self, tmp_path: Path):
        assert get_config_path(tmp_path) == tmp_path / "brandplan.yaml"

    def test_css_output_prefers_app(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        (tmp_path / "src").mkdir()
        assert get_css_output_path(tmp_path) == tmp_path / "app" / "brandplan.css"

    def test_css_output_falls_back_to_src(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        assert get_css_output_path(tmp_path) == tmp_path / "src" / "brandplan.css"

    def test_css_output_at_root(self, tmp_path: Path):
        assert get_css_output_path(tmp_path) == tmp_path / "brandplan.css"


class TestLoad:
    def test_load_default_template(self, project_dir: Path):
        plan = load_brand_plan(project_dir)
        assert plan.space == {"2": "0.5rem", "4": "1rem", "6": "1.5rem"}
        assert set(plan.radius) == {"sm", "md", "lg"}
        assert set(plan.color) == {"brand", "surface", "text"}
        assert plan.color["surface"]["0"].light == "#ffffff"

    def test_unquoted_numeric_keys(self, tmp_path: Path):
        (tmp_path / "brandplan.yaml").write_text(
            "space:\n  2: 0.5rem\nradius: {}\ncolor: {}\n"
        )
        assert load_brand_plan(tmp_path).space == {"2": "0.5rem"}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Config file not found") as exc_info:
            load_brand_plan_data(tmp_path)
        assert 'Run "brandplan init" to create one.' in exc_info.value.message

    def test_empty_file(self, tmp_path: Path):
        (tmp_path / "brandplan.yaml").write_text("# nothing yet\n")
        with pytest.raises(ConfigError, match="is empty"):
            load_brand_plan_data(tmp_path)

    def test_invalid_yaml_has_location(self, tmp_path: Path):
        (tmp_path / "brandplan.yaml").write_text("space:\n  2: [0.5rem\nradius: {}\n")
        with pytest.raises(ConfigError) as exc_info:
            load_brand_plan_data(tmp_path)
        context = exc_info.value.context
        assert context is not None
        assert context.file == tmp_path / "brandplan.yaml"
        assert context.line >= 2

    def test_validation_error_propagates(self, tmp_path: Path):
        (tmp_path / "brandplan.yaml").write_text("space: {}\nradius: {}\n")
        with pytest.raises(BrandPlanValidationError, match="Missing required property: color"):
            load_brand_plan(tmp_path)


class TestWriteDefaultConfig:
    def test_writes_template(self, tmp_path: Path):
        path = write_default_config(tmp_path)
        assert path == tmp_path / "brandplan.yaml"
        assert path.read_text() == CONFIG_TEMPLATE

    def test_existing_file_untouched(self, tmp_path: Path):
        config = tmp_path / "brandplan.yaml"
        config.write_text("space: {}\n")
        assert write_default_config(tmp_path) is None
        assert config.read_text() == "space: {}\n"
