"""Configuration loading and management for caliper-events.

Configuration sources are merged in priority order:
    1. Defaults (defined in CaliperConfig)
    2. Global config (~/.caliper-events.toml)
    3. Project config (./caliper-events.toml)
    4. Explicit config file
    5. Environment variables (CALIPER_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(inclusion="non_null")
    >>> config.inclusion
    'non_null'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

InclusionName = Literal["non_empty", "non_null", "always"]
CompareModeName = Literal["non_extensible", "lenient"]

INCLUSION_NAMES = ("non_empty", "non_null", "always")
COMPARE_MODE_NAMES = ("non_extensible", "lenient")

GLOBAL_CONFIG_NAME = ".caliper-events.toml"
PROJECT_CONFIG_NAME = "caliper-events.toml"
ENV_PREFIX = "CALIPER_"


@dataclass(frozen=True)
class CaliperConfig:
    """Serialization and comparison settings.

    Attributes:
        inclusion: Which empty values are dropped from serialized output
        fail_on_unknown_filter_id: Raise when an object names an unregistered filter
        compare_mode: Default strictness for fixture comparison
        fixtures_root: Directory that logical fixture paths are resolved against
        json_indent: Indentation for JSON text (None = compact)
    """

    inclusion: InclusionName = "non_empty"
    fail_on_unknown_filter_id: bool = True
    compare_mode: CompareModeName = "non_extensible"
    fixtures_root: str = "."
    json_indent: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.fail_on_unknown_filter_id, bool):
            raise InvalidConfigError(
                "fail_on_unknown_filter_id", self.fail_on_unknown_filter_id, "expected true or false"
            )
        if self.inclusion not in INCLUSION_NAMES:
            raise InvalidConfigError(
                "inclusion", self.inclusion, f"expected one of {', '.join(INCLUSION_NAMES)}"
            )
        if self.compare_mode not in COMPARE_MODE_NAMES:
            raise InvalidConfigError(
                "compare_mode",
                self.compare_mode,
                f"expected one of {', '.join(COMPARE_MODE_NAMES)}",
            )
        if self.json_indent is not None and self.json_indent < 0:
            raise InvalidConfigError("json_indent", self.json_indent, "must be non-negative")

    @property
    def fixtures_path(self) -> Path:
        return Path(self.fixtures_root)


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> CaliperConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides, highest priority

    Returns:
        Validated CaliperConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update(overrides)

    try:
        return CaliperConfig(**merged)
    except TypeError as e:
        # Unknown key in a config file or override
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CALIPER_* environment variables.

    Supported environment variables:
        CALIPER_INCLUSION: non_empty/non_null/always
        CALIPER_FAIL_ON_UNKNOWN_FILTER_ID: bool (true/false/1/0)
        CALIPER_COMPARE_MODE: non_extensible/lenient
        CALIPER_FIXTURES_ROOT: path
        CALIPER_JSON_INDENT: int
    """
    type_hints = get_type_hints(CaliperConfig)

    result: dict[str, Any] = {}

    for field_name in CaliperConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}") from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # str and Literal names
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, keeping only the [caliper] table if present."""
    try:
        import tomllib
    except ModuleNotFoundError:
        # Python < 3.11
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    return data.get("caliper", data)
