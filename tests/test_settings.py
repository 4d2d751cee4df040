"""Tests for generator settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from svcgen.errors import ConfigurationError
from svcgen.settings import DEFAULT_FILES, GeneratorSettings, load_settings


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run each test in an empty directory without SVCGEN_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("SVCGEN_LINE_LENGTH", "SVCGEN_MARKER", "SVCGEN_LOG_LEVEL", "SVCGEN_OUTPUT_DIR", "SVCGEN_FILES"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test configuration sources and priority."""

    def test_defaults(self):
        settings = load_settings()
        assert settings.line_length == 88
        assert settings.marker == "#-"
        assert settings.log_level == "INFO"
        assert settings.output_dir == Path("generated")
        assert settings.files == DEFAULT_FILES

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SVCGEN_LINE_LENGTH", "100")
        assert load_settings().line_length == 100

    def test_project_yaml_in_working_directory(self, tmp_path):
        (tmp_path / "svcgen.yaml").write_text("line_length: 72\nfiles: [types.py]\n")
        settings = load_settings()
        assert settings.line_length == 72
        assert settings.files == ["types.py"]

    def test_explicit_project_file(self, tmp_path):
        config = tmp_path / "custom.yaml"
        config.write_text("marker: '##'\n")
        assert load_settings(project_file=config).marker == "##"

    def test_priority(self, tmp_path, monkeypatch):
        """Arguments beat environment, environment beats YAML."""
        (tmp_path / "svcgen.yaml").write_text("line_length: 72\nlog_level: warning\n")
        monkeypatch.setenv("SVCGEN_LINE_LENGTH", "100")
        settings = load_settings()
        assert settings.line_length == 100
        assert settings.log_level == "WARNING"
        assert load_settings(line_length=120).line_length == 120

    def test_none_overrides_ignored(self):
        assert load_settings(line_length=None).line_length == 88

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "broken.yaml"
        config.write_text("line_length: [1, 2\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(project_file=config)
        assert "broken.yaml" in str(exc_info.value)

    def test_missing_project_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_settings(project_file=tmp_path / "absent.yaml")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            load_settings(log_level="chatty")

    def test_invalid_line_length(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(line_length=0)
