"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..exceptions import ConfigurationError, ValidationError
from .registry import Group, GroupRegistry


class ConfigManager:
    """Handles loading and validation of the YAML configuration file."""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = {}
        self._groups: Optional[List[Group]] = None

    def load(self) -> Dict[str, Any]:
        """Load and validate the configuration file."""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with self.config_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse configuration: {exc}") from exc

        self.config = data
        self.validate()
        self._groups = None  # reset cache after reloading
        return self.config

    def validate(self) -> bool:
        """Validate the loaded configuration contents."""
        if not isinstance(self.config, dict):
            raise ValidationError("Configuration must be a mapping.")

        groups_cfg = self.config.get("groups") or []
        if not isinstance(groups_cfg, list):
            raise ValidationError("'groups' must be a list of pattern groups.")

        for index, entry in enumerate(groups_cfg):
            patterns = self._extract_patterns(entry, index)
            for pattern in patterns:
                if not isinstance(pattern, str):
                    raise ValidationError(
                        f"Group at index {index} contains an invalid pattern {pattern!r}; "
                        "patterns must be strings."
                    )
            if isinstance(entry, dict):
                name = entry.get("name")
                if name is not None and not isinstance(name, str):
                    raise ValidationError(f"Group at index {index} name must be a string if specified.")

        logging_cfg = self.config.get("logging") or {}
        if not isinstance(logging_cfg, dict):
            raise ValidationError("'logging' must be a mapping if specified.")
        level = logging_cfg.get("level")
        if level is not None and not isinstance(level, str):
            raise ValidationError("logging.level must be a string such as 'INFO'.")

        return True

    def get_groups(self) -> List[Group]:
        """Return the configured groups as Group instances, in file order."""
        if self._groups is None:
            groups: List[Group] = []
            for index, entry in enumerate(self.config.get("groups") or []):
                patterns = self._extract_patterns(entry, index)
                name = entry.get("name") if isinstance(entry, dict) else None
                # Group() raises ConfigurationError for a bad pattern count.
                groups.append(Group(tuple(patterns), name=name))
            self._groups = groups
        return list(self._groups)

    def build_registry(self, registry: Optional[GroupRegistry] = None) -> GroupRegistry:
        """Append the configured groups to a registry, creating one if needed."""
        target = registry if registry is not None else GroupRegistry()
        target.extend(self.get_groups())
        return target

    def get_logging_config(self) -> Dict[str, Any]:
        """Return logging configuration values with defaults."""
        defaults = {
            "level": "INFO",
            "file": None,
            "console": True,
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        }
        logging_cfg = self.config.get("logging") or {}
        merged = {**defaults, **logging_cfg}
        return merged

    @staticmethod
    def _extract_patterns(entry: Any, index: int) -> List[Any]:
        if isinstance(entry, list):
            return entry
        if isinstance(entry, dict):
            patterns = entry.get("patterns")
            if not isinstance(patterns, list):
                raise ValidationError(f"Group at index {index} must define a list under 'patterns'.")
            return patterns
        raise ValidationError(
            f"Group at index {index} must be a list of patterns or a mapping with 'patterns'."
        )
