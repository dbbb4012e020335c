"""Core application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import ConfigManager, Group, GroupRegistry, default_registry
from .layout import EchoLayoutPresenter, LayoutPlan, LayoutPresenter, plan_layout
from .matching import GroupResolver, ResolvedSet
from .matching.resolver import ExistsCheck, path_exists
from .utils import configure_logging

LOGGER = logging.getLogger(__name__)


class RelatedFileFinder:
    """Coordinates group registration, resolution and layout presentation."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        *,
        registry: Optional[GroupRegistry] = None,
        exists: Optional[ExistsCheck] = None,
        presenter: Optional[LayoutPresenter] = None,
        setup_logging: bool = True,
    ):
        self.config_path = Path(config_path) if config_path else None
        self.config: Optional[ConfigManager] = None
        self.registry = registry if registry is not None else GroupRegistry()

        if config_path:
            self.config = ConfigManager(config_path)
            self.config.load()
            if setup_logging:
                configure_logging(self.config.get_logging_config())
            self.config.build_registry(self.registry)
            LOGGER.debug("Loaded %s group(s) from %s", len(self.registry), self.config_path)

        self.resolver = GroupResolver(exists=exists or path_exists)
        self.presenter = presenter or EchoLayoutPresenter()

    def append_group(self, *patterns: str, name: Optional[str] = None) -> Group:
        return self.registry.append_group(*patterns, name=name)

    def resolve(self, path: str) -> Optional[ResolvedSet]:
        """Return the first group whose related files all exist, or None."""
        resolved = self.resolver.resolve(self.registry, path)
        if resolved is None:
            LOGGER.info("No related files found for '%s'", path)
        else:
            LOGGER.info("Resolved '%s' to %s file(s) via '%s'", path, len(resolved), resolved.group.describe())
        return resolved

    def run(self, path: str, *, layout: bool = True) -> Optional[ResolvedSet]:
        """Resolve the path and hand it to the presenter; do nothing on no match.

        With ``layout=False`` the presenter receives no plan and only the paths matter.
        """
        resolved = self.resolve(path)
        if resolved is None:
            return None
        plan: Optional[LayoutPlan] = None
        if layout:
            plan = plan_layout(resolved.paths, resolved.original_index)
        self.presenter.present(resolved, plan)
        return resolved


def append_group(*patterns: str, name: Optional[str] = None) -> Group:
    """Register a group on the process-wide registry."""
    return default_registry().append_group(*patterns, name=name)


def resolve_for_current_path(path: str, exists: ExistsCheck = path_exists) -> Optional[ResolvedSet]:
    """Resolve a path against the process-wide registry using the real filesystem."""
    return GroupResolver(exists=exists).resolve(default_registry(), path)
