"""Loading of the YAML configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class Config:
    """Settings read from the configuration file."""

    webhook: str = ""


def load_config(path: str | Path) -> Config:
    """Read the YAML file at *path* and return its settings.

    Missing keys keep their defaults and unknown keys are ignored.
    Raises OSError when the file cannot be read and ValueError when its
    content is not a valid configuration.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"configuration in {path} must be a mapping")

    webhook = data.get("webhook")
    if webhook is None:
        return Config()
    if isinstance(webhook, (dict, list)):
        raise ValueError(f"'webhook' in {path} must be a string")
    return Config(webhook=str(webhook))