"""Simplified configuration for Branch Scout."""

import os
import yaml
from typing import List, Optional
from dataclasses import dataclass, field

from .logger import get_logger


CONFIG_FILENAME = ".branch-scout.yml"


@dataclass
class GitConfig:
    """Repository query configuration."""

    remote: str = "origin"
    recency_days: int = 30  # Only commits this recent count towards distances
    query_timeout: Optional[float] = None  # Seconds; None waits forever


@dataclass
class BaseConfig:
    """Base branch inference configuration."""

    priority: Optional[str] = None


@dataclass
class LabelRule:
    """Label applied when a diff touches a filename or file content."""

    name: str
    filename: Optional[str] = None
    content: Optional[str] = None


@dataclass
class Config:
    """Simplified configuration."""

    git: GitConfig
    base: BaseConfig
    labels: List[LabelRule] = field(default_factory=list)


class ConfigManager:
    """Simplified configuration manager."""

    def __init__(self):
        self.default_config_path = os.path.expanduser(f"~/{CONFIG_FILENAME}")
        self.logger = get_logger()

    def load_config(self, config_path: Optional[str] = None) -> Config:
        """Load configuration from file or create default."""

        # Try to load from specified path, then default path
        paths_to_try = []
        if config_path:
            paths_to_try.append(config_path)

        # Try local project config
        if os.path.exists(CONFIG_FILENAME):
            paths_to_try.append(CONFIG_FILENAME)

        # Try global config
        paths_to_try.append(self.default_config_path)

        config_data = {}
        for path in paths_to_try:
            if os.path.exists(path):
                try:
                    with open(path, "r") as f:
                        config_data = yaml.safe_load(f) or {}
                    self.logger.debug(f"Loaded configuration from {path}")
                    break
                except (OSError, yaml.YAMLError) as e:
                    self.logger.debug(f"Skipping unreadable config {path}: {e}")
                    continue

        if not isinstance(config_data, dict):
            config_data = {}

        git_config_data = config_data.get("git") or {}
        git_config = GitConfig(
            remote=git_config_data.get("remote", "origin"),
            recency_days=git_config_data.get("recency_days", 30),
            query_timeout=git_config_data.get("query_timeout"),
        )

        base_config_data = config_data.get("base") or {}
        base_config = BaseConfig(priority=base_config_data.get("priority"))

        labels = []
        for rule in config_data.get("labels") or []:
            if not isinstance(rule, dict) or not rule.get("name"):
                self.logger.warning(f"Ignoring label rule without a name: {rule}")
                continue
            labels.append(
                LabelRule(
                    name=rule["name"],
                    filename=rule.get("filename"),
                    content=rule.get("content"),
                )
            )

        return Config(git=git_config, base=base_config, labels=labels)

    def create_default_config(self, global_config: bool = False) -> str:
        """Create a default config file."""
        config = {
            "git": {
                "remote": "origin",
                "recency_days": 30,
                "query_timeout": None,
            },
            "base": {"priority": None},
            "labels": [],
        }

        if global_config:
            path = self.default_config_path
        else:
            path = CONFIG_FILENAME

        with open(path, "w") as f:
            yaml.dump(config, f, default_flow_style=False)

        return path
