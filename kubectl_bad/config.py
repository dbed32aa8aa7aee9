"""Scan configuration loading."""

import json
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .health.rules import DEFAULT_NODE_GROUP_LABELS
from .utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "KUBECTL_BAD_CONFIG"


class ConfigError(Exception):
    """The configuration file could not be read."""


class ScanConfig(BaseModel):
    """Settings that tune a scan without code changes."""

    node_group_labels: List[str] = Field(default_factory=lambda: list(DEFAULT_NODE_GROUP_LABELS))
    request_timeout: Optional[str] = None
    kubectl_binary: str = "kubectl"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ScanConfig":
        """Load configuration from a YAML or JSON file.

        Falls back to the path in ``KUBECTL_BAD_CONFIG`` and to defaults when
        no file exists.
        """
        if config_path is None and os.environ.get(CONFIG_ENV_VAR):
            config_path = Path(os.environ[CONFIG_ENV_VAR])
        if config_path is None or not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                if config_path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            config = cls(**(data or {}))
        except (OSError, yaml.YAMLError, json.JSONDecodeError, ValidationError, TypeError) as e:
            raise ConfigError(f"invalid config file {config_path}: {e}") from e

        logger.info(f"Loaded scan config from {config_path}")
        return config
