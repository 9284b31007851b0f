"""
Tunable defaults of the numeric helpers, loadable from YAML.

    numeric:
      chop:
        threshold: 1.0e-12
      nan_search:
        x_tolerance: ${NAN_TOLERANCE:-1.0e-6}
        max_iterations: 60

Unquoted scalars may reference environment variables as ``${VAR}`` or
``${VAR:-default}``. A substituted value that reads as a number or boolean
keeps that type.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path

import yaml
from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from yaml.loader import SafeLoader

from numeric_core.floats import DEFAULT_CHOP_THRESHOLD, FloatArray, FloatBuffer, Real, chop, chop_array
from numeric_core.nan_search import DEFAULT_MAX_ITERATIONS, NaNBoundary, find_nan

CONFIG_SECTION: str = "numeric"
ENV_TAG: str = "!env"
_ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class _EnvLoader(SafeLoader):
    pass


def _expand_env(match: re.Match[str]) -> str:
    return os.environ.get(match.group(1), match.group(2) or "")


def _construct_env(loader: SafeLoader, node: yaml.ScalarNode) -> object:
    expanded: str = _ENV_PATTERN.sub(_expand_env, loader.construct_scalar(node))
    try:
        value = yaml.safe_load(expanded)
    except yaml.YAMLError:
        return expanded
    return value if isinstance(value, (bool, int, float)) else expanded


_EnvLoader.add_implicit_resolver(ENV_TAG, re.compile(r".*\$\{\w+(?::-[^}]*)?\}.*"), None)
_EnvLoader.add_constructor(ENV_TAG, _construct_env)


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Read a YAML mapping, expanding environment variable references.

    Raises:
        ConfigError: If the file is missing, is not valid YAML or its root is not a mapping.
    """
    config_path: Path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        data = yaml.load(config_path.read_text(encoding="utf-8"), Loader=_EnvLoader)
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error in {config_path}: {err}") from err
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping (dict) in {config_path}")
    return data


class ChopConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    threshold: float = Field(default=DEFAULT_CHOP_THRESHOLD, gt=0.0)

    def chop(self, x: Real) -> Real:
        return chop(x, self.threshold)

    def chop_array(self, x: FloatArray, out: FloatBuffer | None = None) -> FloatBuffer:
        return chop_array(x, self.threshold, out)


class NaNSearchConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    x_tolerance: float = Field(default=1e-6, gt=0.0)
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=1)

    def find_nan(
        self,
        f: Callable[[Real], Real],
        x_valid: Real,
        x_nan: Real,
        *,
        f_valid: Real | None = None,
    ) -> NaNBoundary:
        """Run find_nan with this tolerance and iteration budget."""
        return find_nan(f, x_valid, x_nan, self.x_tolerance, self.max_iterations, f_valid=f_valid)


class NumericConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    chop: ChopConfig = Field(default_factory=ChopConfig)
    nan_search: NaNSearchConfig = Field(default_factory=NaNSearchConfig)


@beartype
def load_numeric_config(path: str | Path) -> NumericConfig:
    """Load the `numeric` section of a YAML config file. A missing section yields the defaults."""
    section = load_from_yaml(path).get(CONFIG_SECTION) or {}
    try:
        return NumericConfig.model_validate(section)
    except ValidationError as err:
        raise ConfigError(f"Invalid '{CONFIG_SECTION}' config in {path}: {err}") from err
