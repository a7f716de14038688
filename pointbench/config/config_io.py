"""Reading and writing pointbench config and result files.

``--config`` files and ``--output`` exports share these helpers; the format
follows the file extension (``.yaml``/``.yml`` for YAML, anything else JSON).
"""

import json
import os
from typing import Any

import yaml


def ensure_parent_dir(filepath: str) -> None:
    """Create the directory an export will be written into."""
    parent = os.path.dirname(filepath) or "."
    os.makedirs(parent, exist_ok=True)


def is_yaml_path(filepath: str) -> bool:
    return filepath.endswith(".yaml") or filepath.endswith(".yml")


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Load a YAML config file.

    Args:
        filepath: Path to a config written as section -> key -> value

    Returns:
        Parsed sections; an empty file gives an empty dict
    """
    with open(filepath, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if data is not None else {}


def load_json_file(filepath: str) -> dict[str, Any]:
    """Load a JSON config file; ``null`` gives an empty dict."""
    with open(filepath, encoding="utf-8") as f:
        data = json.load(f)
    return data if data is not None else {}


def save_yaml_file(filepath: str, data: dict[str, Any]) -> None:
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False)


def save_json_file(filepath: str, data: dict[str, Any], indent: int = 2) -> None:
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def save_data_file(filepath: str, data: dict[str, Any]) -> None:
    """Write loop state or measure results in the format the extension names."""
    if is_yaml_path(filepath):
        save_yaml_file(filepath, data)
    else:
        save_json_file(filepath, data)
