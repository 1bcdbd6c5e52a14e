"""Configuration helpers for the lookup engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def api_url(self) -> str:
        return str(self.raw.get("api_url", DEFAULTS["api_url"]))

    @property
    def timeout(self) -> float:
        return float(self.raw.get("timeout", DEFAULTS["timeout"]))

    @property
    def user_agent(self) -> str:
        return str(self.raw.get("user_agent", DEFAULTS["user_agent"]))

    @property
    def excluded_namespaces(self) -> List[str]:
        return [str(name) for name in self.raw.get("excluded_namespaces", [])]

    def command_for(self, title: str) -> str:
        """Return the re-query command that looks up ``title``."""

        template = str(self.raw.get("command_template", DEFAULTS["command_template"]))
        return template.format(title=title)


DEFAULTS: Dict[str, Any] = {
    "api_url": "https://en.wikipedia.org/w/api.php",
    "timeout": 5,
    "user_agent": "wikilookup/0.1",
    "command_template": "/tell <myname> wiki {title}",
    "excluded_namespaces": [
        "Category",
        "File",
        "Help",
        "Image",
        "Portal",
        "Special",
        "Talk",
        "Template",
        "Wikipedia",
    ],
}


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        merge_into(data, user)

    return EngineConfig(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value
