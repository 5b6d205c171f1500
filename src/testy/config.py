"""Configuration loaded from the ``[tool.testy]`` table of ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from testy.errors import ConfigError
from testy.i18n import DEFAULT_LANGUAGE, available_languages

logger = logging.getLogger(__name__)

PYPROJECT_FILE = "pyproject.toml"


class TestyConfig(BaseModel):
    """Settings shared by the runner and the console UI.

    Attributes:
    ----------
    fail_fast: bool
        Stop a test at its first failed assertion
    language: str
        Language used for failure and console messages
    verbose: bool
        Print pending and skip reasons under each result line (failure and
        error details always show)
    """

    __test__ = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    fail_fast: bool = False
    language: str = DEFAULT_LANGUAGE
    verbose: bool = False

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        languages = available_languages()
        if v not in languages:
            raise ValueError(f"language must be one of {', '.join(languages)}, got {v!r}")
        return v


DEFAULT_CONFIG = TestyConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` (default: cwd) looking for pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILE
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> TestyConfig:
    """Load ``[tool.testy]`` from the nearest pyproject.toml.

    Raises:
    ------
    ConfigError
        If the file is not valid TOML or the table fails validation.
    """
    path = find_pyproject(start)
    if path is None:
        return DEFAULT_CONFIG

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, exc) from exc

    table = data.get("tool", {}).get("testy")
    if table is None:
        return DEFAULT_CONFIG

    try:
        config = TestyConfig.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(path, exc) from exc

    logger.debug("Loaded testy configuration from %s: %s", path, config)
    return config


__all__ = ["DEFAULT_CONFIG", "TestyConfig", "find_pyproject", "load_config"]
