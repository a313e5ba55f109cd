"""YAML/JSON loaders for input files and packaged presets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from firstmillion.config.schema import ProjectionInputs
from firstmillion.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the firstmillion package root.

    Args:
        relative_path: Path relative to ``src/firstmillion/``,
            e.g. ``"config/presets.yaml"``.

    Returns:
        Parsed YAML content.
    """
    package_root = Path(__file__).resolve().parent.parent
    return load_yaml(package_root / relative_path)


def load_inputs_file(path: Path) -> ProjectionInputs:
    """Read projection inputs from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        ConfigError: If the suffix is not supported or the document is not a mapping.
        pydantic.ValidationError: If the values fail validation.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
    elif suffix in (".yaml", ".yml"):
        data = load_yaml(path)
    else:
        raise ConfigError(f"Unsupported config format '{suffix}' (use .json, .yaml or .yml)")

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of input values")
    return ProjectionInputs.model_validate(data)
