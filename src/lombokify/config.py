"""
Runtime Configuration Store.

Settings come from a ``[tool.lombokify]`` table in the nearest
``pyproject.toml`` (searched upwards from the target directory), overlaid by
command line overrides.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from lombokify.core.errors import LombokifyConfigError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for a rewrite run.
  """

  workers: Optional[int] = Field(None, description="Thread pool size. None lets the executor decide.")
  include: List[str] = Field(default_factory=lambda: ["*"], description="Glob patterns matched against file names.")
  dry_run: bool = Field(False, description="If True, report changes without writing files.")

  @field_validator("workers")
  @classmethod
  def validate_workers(cls, v: Optional[int]) -> Optional[int]:
    if v is not None and v < 1:
      raise ValueError("workers must be at least 1")
    return v

  @field_validator("include")
  @classmethod
  def validate_include(cls, v: List[str]) -> List[str]:
    cleaned = [p.strip() for p in v if p and p.strip()]
    if not cleaned:
      raise ValueError("include must contain at least one pattern")
    return cleaned

  def matches(self, path: Path) -> bool:
    """
    Checks a file name against the include patterns.

    Args:
        path (Path): Candidate file.

    Returns:
        bool: True if any pattern matches the file name.
    """
    return any(path.match(pattern) for pattern in self.include)

  @classmethod
  def load(
    cls,
    workers: Optional[int] = None,
    include: Optional[List[str]] = None,
    dry_run: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        workers (Optional[int]): Override for the pool size.
        include (Optional[List[str]]): Override for the include patterns.
        dry_run (Optional[bool]): Override for dry-run mode.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        LombokifyConfigError: If the merged settings are invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = dict(toml_config)
    if workers is not None:
      merged["workers"] = workers
    if include:
      merged["include"] = include
    if dry_run is not None:
      merged["dry_run"] = dry_run

    known = {k: v for k, v in merged.items() if k in cls.model_fields}
    try:
      return cls.model_validate(known)
    except ValidationError as e:
      raise LombokifyConfigError(f"Invalid lombokify configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        raise LombokifyConfigError(f"Cannot read {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get("lombokify", {}), parent

  return {}, None
