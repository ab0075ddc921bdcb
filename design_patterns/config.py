"""Runner configuration discovery.

Settings are resolved in three layers, later layers winning:

1. RunnerConfig defaults
2. The [tool.design_patterns] table of pyproject.toml in the project root
3. Environment variables:

   DESIGN_PATTERNS_DEFAULT_SAMPLE: sample run when none is named
   DESIGN_PATTERNS_VERBOSE: enable DEBUG logging (true/1/yes)
   DESIGN_PATTERNS_COLOR: colored console output (true/1/yes)
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import pydantic as pd

logger = logging.getLogger(__name__)

ENV_PREFIX = "DESIGN_PATTERNS_"
PYPROJECT_TABLE = "design_patterns"

_TRUE_VALUES = ("true", "1", "yes")


class RunnerConfig(pd.BaseModel):
    """Settings for the sample runner.

    Attributes:
        default_sample: Name of the sample run when none is given
        verbose: Whether DEBUG logging is enabled
        color: Whether console output is colored
    """

    default_sample: str = "iterator"
    verbose: bool = False
    color: bool = True

    model_config = pd.ConfigDict(extra="ignore")


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def read_pyproject_table(project_root: Path) -> Dict[str, Any]:
    """Read the [tool.design_patterns] table from pyproject.toml.

    Args:
        project_root: Directory containing pyproject.toml

    Returns:
        The table contents, or an empty dict if the file or table is
        missing or the file cannot be parsed
    """
    config_path = project_root / "pyproject.toml"

    if not config_path.exists():
        logger.debug(f"No pyproject.toml found in {project_root}")
        return {}

    try:
        with open(config_path, "rb") as f:
            content = tomllib.load(f)
    except (IOError, OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to parse pyproject.toml {config_path}: {e}")
        return {}

    table = content.get("tool", {}).get(PYPROJECT_TABLE, {})
    if not isinstance(table, dict):
        logger.warning(f"[tool.{PYPROJECT_TABLE}] in {config_path} is not a table, ignoring")
        return {}
    # pyproject keys are conventionally kebab-case
    return {key.replace("-", "_"): value for key, value in table.items()}


def read_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect settings from DESIGN_PATTERNS_* environment variables."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}

    sample = environ.get(f"{ENV_PREFIX}DEFAULT_SAMPLE")
    if sample:
        overrides["default_sample"] = sample.strip()

    for key in ("verbose", "color"):
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value is not None:
            overrides[key] = _env_flag(value)

    return overrides


def load_config(
    project_root: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RunnerConfig:
    """Load runner configuration from pyproject.toml and the environment.

    Args:
        project_root: Directory to look for pyproject.toml in (default: cwd)
        environ: Environment mapping (default: os.environ)

    Returns:
        The resolved RunnerConfig

    Raises:
        pydantic.ValidationError: If pyproject.toml holds values of the wrong type
    """
    root = Path(project_root) if project_root is not None else Path.cwd()

    values: Dict[str, Any] = {}
    values.update(read_pyproject_table(root))
    values.update(read_env_overrides(environ))

    config = RunnerConfig(**values)
    logger.debug(f"Loaded runner config: {config.model_dump()}")
    return config
