"""Pattern groups and the ordered registry that holds them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2
MAX_GROUP_SIZE = 4


@dataclass(frozen=True)
class Group:
    """An ordered family of two to four related path patterns."""

    patterns: Tuple[str, ...]
    name: Optional[str] = None

    def __post_init__(self) -> None:
        count = len(self.patterns)
        if count < MIN_GROUP_SIZE or count > MAX_GROUP_SIZE:
            raise ConfigurationError(
                f"A group needs between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE} patterns, got {count}: "
                f"{list(self.patterns)!r}"
            )

    def __len__(self) -> int:
        return len(self.patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self.patterns)

    def describe(self) -> str:
        return self.name or " | ".join(self.patterns)


class GroupRegistry:
    """Append-only list of groups; registration order is match priority."""

    def __init__(self) -> None:
        self._groups: List[Group] = []

    def append_group(self, *patterns: str, name: Optional[str] = None) -> Group:
        """Register a new group after every existing one."""
        group = Group(tuple(patterns), name=name)
        self._groups.append(group)
        LOGGER.debug("Registered group #%s: %s", len(self._groups), group.describe())
        return group

    def extend(self, groups: List[Group]) -> None:
        for group in groups:
            self._groups.append(group)

    @property
    def groups(self) -> Tuple[Group, ...]:
        return tuple(self._groups)

    def clear(self) -> None:
        self._groups.clear()

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(tuple(self._groups))


_DEFAULT_REGISTRY = GroupRegistry()


def default_registry() -> GroupRegistry:
    """Return the process-wide registry used by the module-level helpers."""
    return _DEFAULT_REGISTRY
