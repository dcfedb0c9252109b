"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import TagI18nConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_tag_i18n_config(path: Path) -> TagI18nConfig:
    """
    Load tag_i18n.yaml into a TagI18nConfig.

    A relative `tags_file` is resolved against the config file's directory.

    Raises:
        FileNotFoundError: If the config file is missing
        ValueError: If the YAML is not a mapping or has invalid values
    """
    data = _load_yaml(path)

    tags_file = data.get("tags_file")
    if tags_file:
        p = Path(str(tags_file))
        data["tags_file"] = p if p.is_absolute() else (path.parent / p)

    if "loader" in data and data["loader"] is not None:
        data["loader"] = str(data["loader"]).strip().lower()

    return TagI18nConfig(**data)
