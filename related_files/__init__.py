"""Locate and lay out the files related to a path through wildcard pattern groups."""

__version__ = "1.0.0"

from .config import ConfigManager, Group, GroupRegistry, default_registry
from .exceptions import ConfigurationError, RelatedFilesError, ValidationError
from .layout import LayoutPlan, plan_layout
from .main import RelatedFileFinder, append_group, resolve_for_current_path
from .matching import Bindings, GroupResolver, ResolvedSet, resolve

__all__ = [
    "__version__",
    "Bindings",
    "ConfigManager",
    "ConfigurationError",
    "Group",
    "GroupRegistry",
    "GroupResolver",
    "LayoutPlan",
    "RelatedFileFinder",
    "RelatedFilesError",
    "ResolvedSet",
    "ValidationError",
    "append_group",
    "default_registry",
    "plan_layout",
    "resolve",
    "resolve_for_current_path",
]
