"""Unit tests for ConfigFileLoader (infrastructure/config_file_loader.py)."""

from pathlib import Path

import pytest

from frontend_rules.infrastructure.config_file_loader import ConfigFileLoader

PYPROJECT = """
[project]
name = "web-app"

[tool.frontend-rules]
extends = "recommended"

[tool.frontend-rules.rules]
no-default-export = "off"
"eslint-frontend-rules/enforce-alias-import-paths" = ["error", { aliases = ["@/"] }]

[tool.other]
value = 1
"""


class TestConfigFileLoader:
    def test_reads_section_from_nearest_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)
        config, tool = ConfigFileLoader.load_config_from_fs(nested)
        assert config["extends"] == "recommended"
        assert config["rules"] == {
            "no-default-export": "off",
            "eslint-frontend-rules/enforce-alias-import-paths": ["error", {"aliases": ["@/"]}],
        }
        assert tool["other"] == {"value": 1}

    def test_defaults_to_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        config, _tool = ConfigFileLoader.load_config_from_fs()
        assert config["extends"] == "recommended"

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        config, tool = ConfigFileLoader.load_config_from_fs(tmp_path)
        assert config == {}
        assert tool == {}

    def test_unparseable_pyproject_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.frontend-rules\n", encoding="utf-8")
        config, _tool = ConfigFileLoader.load_config_from_fs(tmp_path)
        assert config == {}
        assert "Ignoring unparseable" in caplog.text
