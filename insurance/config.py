"""
Central configuration for the policy catalog service.
All values can be overridden via environment variables or a local config.json.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

_ROOT = Path(__file__).parent.parent
_CONFIG_FILE = _ROOT / "config.json"
_ENV_PREFIX = "INSURANCE_"


@dataclass
class Config:
    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8080
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])

    # Catalog
    data_file: Path = field(default_factory=lambda: _ROOT / "data" / "insurance_policies.json")

    # Logging
    log_level: str = "info"

    def __post_init__(self):
        self.data_file = Path(self.data_file)

    @classmethod
    def load(cls, config_file: Path = _CONFIG_FILE) -> "Config":
        cfg = cls()
        if config_file.exists():
            overrides = json.loads(config_file.read_text())
            for k, v in overrides.items():
                if hasattr(cfg, k):
                    setattr(cfg, k, v)
        # environment variable overrides (INSURANCE_*)
        for k in cfg.__dataclass_fields__:  # type: ignore[attr-defined]
            env_key = f"{_ENV_PREFIX}{k.upper()}"
            if env_key in os.environ:
                setattr(cfg, k, _coerce(getattr(cfg, k), os.environ[env_key]))
        cfg.__post_init__()
        return cfg


def _coerce(current, raw: str):
    if isinstance(current, list):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if isinstance(current, Path):
        return Path(raw)
    return type(current)(raw)


# Module-level singleton
config = Config.load()
