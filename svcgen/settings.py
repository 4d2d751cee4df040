# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Generator configuration using Pydantic settings.

Configuration Priority
----------------------
Settings are loaded from multiple sources with the following priority
(highest to lowest):
1. Explicit arguments (CLI options, constructor kwargs)
2. Environment variables (SVCGEN_* prefix)
3. Project config file (svcgen.yaml in the working directory, or the file
   passed as ``project_file``)
4. Built-in defaults
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict
from rich.console import Console

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "svcgen.yaml"

DEFAULT_FILES = [
    "client.py",
    "types.py",
    "provider.py",
    "server.py",
    "__init__.py",
    "README.md",
]

console = Console(stderr=True)


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading a project YAML file."""

    def __init__(self, settings_cls: type, project_file: Optional[Path] = None):
        super().__init__(settings_cls)
        if project_file is None:
            candidate = Path.cwd() / PROJECT_CONFIG_FILE
            project_file = candidate if candidate.exists() else None
        self.project_file = project_file
        self._data = self._load(project_file) if project_file else {}

    @staticmethod
    def _load(project_file: Path) -> Dict[str, Any]:
        try:
            with open(project_file) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {project_file}") from e
        except yaml.YAMLError as e:
            if hasattr(e, "problem_mark"):
                mark = e.problem_mark
                location = f"line {mark.line + 1}, column {mark.column + 1}"
            else:
                location = "unknown location"
            raise ConfigurationError(
                f"Invalid YAML in config file {project_file} at {location}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {project_file} must contain a mapping")
        return data

    def get_field_value(self, field_name: str, field_info: Any) -> tuple:
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {
            name: self._data[name]
            for name in self.settings_cls.model_fields
            if name in self._data
        }


class GeneratorSettings(BaseSettings):
    """Settings for a generation run."""

    line_length: int = Field(default=88, gt=0, description="Line length for formatted Python output")
    marker: str = Field(default="#-", min_length=1, description="Generation marker line content")
    log_level: str = Field(default="INFO", description="Logging level name")
    output_dir: Path = Field(default=Path("generated"), description="Directory for written files")
    files: List[str] = Field(default_factory=lambda: list(DEFAULT_FILES), description="Files to generate")
    project_file: Optional[Path] = Field(default=None, description="Project YAML file that was requested")

    model_config = SettingsConfigDict(
        env_prefix="SVCGEN_",
        extra="ignore",
        case_sensitive=False,
        env_file=None,
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type,
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple:
        project_file = init_settings().get("project_file")
        return (
            init_settings,
            env_settings,
            YamlSettingsSource(settings_cls, project_file=Path(project_file) if project_file else None),
        )


def load_settings(project_file: Optional[Path] = None, **overrides) -> GeneratorSettings:
    """Load settings with hierarchical priority.

    Args:
        project_file: Explicit project YAML file; defaults to svcgen.yaml
            in the working directory when present
        **overrides: Highest-priority values; ``None`` values are ignored

    Returns:
        GeneratorSettings instance

    Raises:
        ConfigurationError: If the YAML file is unreadable or invalid
        pydantic.ValidationError: If a value fails validation
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if project_file:
        overrides["project_file"] = Path(project_file)
    try:
        return GeneratorSettings(**overrides)
    except ValidationError as e:
        console.print("[bold red]Configuration validation failed:[/bold red]")
        for error in e.errors():
            field = " → ".join(str(x) for x in error["loc"])
            console.print(f"  [red]{field}: {error['msg']}[/red]")
        raise
