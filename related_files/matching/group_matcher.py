"""First-match lookup of a path against the patterns of one group."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config.registry import Group
from .pattern_compiler import Bindings, PatternCompiler

LOGGER = logging.getLogger(__name__)


class GroupMatcher:
    """Finds the first pattern of a group that matches a path."""

    def __init__(self, compiler: Optional[PatternCompiler] = None) -> None:
        self.compiler = compiler or PatternCompiler()

    def find_match(self, group: Group, path: str) -> Optional[Tuple[int, Bindings]]:
        """Return the index of the matching pattern and its bindings, if any."""
        for index, pattern in enumerate(group.patterns):
            bindings = self.compiler.compile(pattern).match(path)
            if bindings is not None:
                LOGGER.debug("Path '%s' matched pattern '%s' with %s", path, pattern, bindings.as_dict())
                return index, bindings
        return None

    def find_bindings(self, group: Group, path: str) -> Optional[Bindings]:
        """Return the bindings of the first matching pattern, or None."""
        found = self.find_match(group, path)
        if found is None:
            return None
        return found[1]
