"""Configuration loading for browser utilities.

Settings are layered: model defaults, then an optional YAML file, then
BROWSER_UTILS_* environment variables. The YAML file has two optional
sections whose keys are the model field names:

    policy:
      timeout: 5
      retry_count: 2
      must_stable: false
    operation:
      path: ./screenshots
      name: checkout
"""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from browser_utils.core.errors import ConfigError
from browser_utils.core.logging import ErrorIds, logError, logForDebugging
from browser_utils.models.policy import OperationOptions, Policy

ENV_PREFIX = "BROWSER_UTILS_"

# Environment variable suffix -> (section, field)
ENV_FIELDS: dict[str, tuple[str, str]] = {
    "TIMEOUT": ("policy", "timeout"),
    "STABLE_DURATION": ("policy", "stable_duration"),
    "RETRY_COUNT": ("policy", "retry_count"),
    "RETRY_DELAY": ("policy", "retry_delay"),
    "MUST_VISIBLE": ("policy", "must_visible"),
    "MUST_STABLE": ("policy", "must_stable"),
    "MUST_WAIT_LOAD": ("policy", "must_wait_load"),
    "OPERATION_TIMEOUT": ("operation", "timeout"),
    "SCREENSHOT_DIR": ("operation", "path"),
    "SCREENSHOT_NAME": ("operation", "name"),
}


class Settings(BaseModel):
    """Resolved configuration.

    Attributes:
        policy: Policy for safe_click and safe_element.
        operation: Options for run_operation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    policy: Policy = Field(default_factory=Policy)
    operation: OperationOptions = Field(default_factory=OperationOptions)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _env_overrides(environ: Mapping[str, str]) -> dict[str, dict[str, str]]:
    overrides: dict[str, dict[str, str]] = {}
    for suffix, (section, field) in ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None:
            overrides.setdefault(section, {})[field] = value
    return overrides


def load_settings(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from defaults, an optional YAML file, and the environment.

    Args:
        path: YAML file to read. None skips the file layer.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        The validated Settings.

    Raises:
        ConfigError: If the file cannot be read or parsed, or a value is invalid.
    """
    if environ is None:
        environ = os.environ

    data: dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(Path(path))
        logForDebugging(f"Loaded config file {path}")

    for section, values in _env_overrides(environ).items():
        current = data.get(section) or {}
        if not isinstance(current, dict):
            raise ConfigError(f"config section {section!r} must be a mapping")
        data[section] = {**current, **values}

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        logError(ErrorIds.CONFIG_INVALID, f"Invalid configuration: {e}")
        raise ConfigError(f"invalid configuration: {e}") from e
