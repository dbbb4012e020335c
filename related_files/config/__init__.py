"""Configuration utilities for the related file finder."""

from .config_manager import ConfigManager
from .registry import Group, GroupRegistry, default_registry

__all__ = ["ConfigManager", "Group", "GroupRegistry", "default_registry"]
