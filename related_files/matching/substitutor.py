"""Substitution of wildcard bindings back into group patterns."""

from __future__ import annotations

import logging
import re
from typing import Tuple

from ..config.registry import Group
from .pattern_compiler import TOKEN_RE, Bindings

LOGGER = logging.getLogger(__name__)


def substitute(pattern: str, bindings: Bindings) -> str:
    """Replace every bound token in one pattern; unbound tokens stay literal."""

    def _replace(found: re.Match[str]) -> str:
        token = found.group(0)
        value = bindings.get(token)
        if value is None:
            LOGGER.debug("Token %s in '%s' has no binding; leaving it in place", token, pattern)
            return token
        return value

    return TOKEN_RE.sub(_replace, pattern)


def apply(group: Group, bindings: Bindings) -> Tuple[str, ...]:
    """Return one concrete path per pattern of the group, in group order."""
    return tuple(substitute(pattern, bindings) for pattern in group.patterns)
