"""Generation configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from .exceptions import ConfigurationError
from .terrain.config import GenerationConfig

CONFIGS_DIR = Path(__file__).parent.parent.parent / "configs"


def load_config(config_path: Path) -> GenerationConfig:
    """Load generation configuration from a TOML file.

    Top-level keys map onto GenerationConfig, with [thresholds],
    [thresholds.density] and [style] tables for the nested models.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Validated GenerationConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If the file is malformed or a value is invalid.
    """
    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(str(config_path), str(e)) from e

    try:
        return GenerationConfig.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or str(config_path)
        raise ConfigurationError(field, error["msg"]) from e


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = CONFIGS_DIR / f"{name}.toml"
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {CONFIGS_DIR}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    if not CONFIGS_DIR.exists():
        return []
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))
