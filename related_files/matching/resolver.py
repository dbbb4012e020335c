"""Resolution of an input path against the registered pattern groups."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..config.registry import Group
from .group_matcher import GroupMatcher
from .pattern_compiler import Bindings
from .substitutor import apply

LOGGER = logging.getLogger(__name__)

ExistsCheck = Callable[[str], bool]


def path_exists(path: str) -> bool:
    """Filesystem-backed existence check used when none is injected."""
    return Path(path).exists()


@dataclass(frozen=True)
class ResolvedSet:
    """Concrete paths produced from a group, in the group's order."""

    paths: Tuple[str, ...]
    group: Group
    matched_index: int
    bindings: Bindings
    source_path: str

    @property
    def original_index(self) -> Optional[int]:
        """Index of the entry equal to the input path, if any."""
        for index, candidate in enumerate(self.paths):
            if candidate == self.source_path:
                return index
        return None

    def missing(self, exists: ExistsCheck) -> List[str]:
        return [candidate for candidate in self.paths if not exists(candidate)]

    def __len__(self) -> int:
        return len(self.paths)


class GroupResolver:
    """Searches groups in priority order for one whose files all exist."""

    def __init__(self, matcher: Optional[GroupMatcher] = None, exists: Optional[ExistsCheck] = None) -> None:
        self.matcher = matcher or GroupMatcher()
        self.exists = exists or path_exists

    def iter_candidates(self, groups: Iterable[Group], path: str) -> Iterator[ResolvedSet]:
        """Yield every matching group with its substituted paths, highest priority first."""
        for group in groups:
            found = self.matcher.find_match(group, path)
            if found is None:
                continue
            index, bindings = found
            yield ResolvedSet(
                paths=apply(group, bindings),
                group=group,
                matched_index=index,
                bindings=bindings,
                source_path=path,
            )

    def resolve(
        self,
        groups: Iterable[Group],
        path: str,
        exists: Optional[ExistsCheck] = None,
    ) -> Optional[ResolvedSet]:
        """Return the first candidate whose paths all exist, or None."""
        check = exists or self.exists
        for candidate in self.iter_candidates(groups, path):
            missing = candidate.missing(check)
            if not missing:
                LOGGER.debug("Group '%s' resolved '%s'", candidate.group.describe(), path)
                return candidate
            LOGGER.debug(
                "Group '%s' matched '%s' but %s file(s) are missing: %s",
                candidate.group.describe(),
                path,
                len(missing),
                ", ".join(missing),
            )
        LOGGER.debug("No group resolved '%s'", path)
        return None


def resolve(
    groups: Iterable[Group],
    path: str,
    exists: ExistsCheck = path_exists,
) -> Optional[ResolvedSet]:
    """Resolve a path against the groups using a one-off resolver."""
    return GroupResolver(exists=exists).resolve(groups, path)
