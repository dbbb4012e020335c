"""Compilation of ``%1``..``%9`` path patterns into anchored matchers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

TOKEN_RE = re.compile(r"%[1-9]")

_SPLIT_RE = re.compile(r"(%[1-9])")
_CAPTURE = "(.*)"


@dataclass(frozen=True)
class Bindings:
    """Wildcard token to captured value pairs, in order of discovery."""

    pairs: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_captures(cls, tokens: Sequence[str], captures: Sequence[str]) -> "Bindings":
        """Pair tokens with captures positionally; the first occurrence of a token wins."""
        seen: Dict[str, str] = {}
        for token, value in zip(tokens, captures):
            seen.setdefault(token, value)
        return cls(tuple(seen.items()))

    def get(self, token: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.pairs:
            if key == token:
                return value
        return default

    def tokens(self) -> List[str]:
        return [key for key, _ in self.pairs]

    def as_dict(self) -> Dict[str, str]:
        return dict(self.pairs)

    def __getitem__(self, token: str) -> str:
        value = self.get(token)
        if value is None:
            raise KeyError(token)
        return value

    def __contains__(self, token: object) -> bool:
        return any(key == token for key, _ in self.pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens())

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class CompiledPattern:
    """An anchored matcher for one pattern plus the tokens its groups capture."""

    pattern: str
    regex: re.Pattern[str]
    tokens: Tuple[str, ...] = field(default_factory=tuple)

    def match(self, path: str) -> Optional[Bindings]:
        """Return the bindings when the whole path matches, otherwise None."""
        found = self.regex.fullmatch(path)
        if found is None:
            return None
        return Bindings.from_captures(self.tokens, found.groups())


def compile_pattern(pattern: str) -> CompiledPattern:
    """Translate a pattern into a regex, escaping everything but the tokens."""
    parts: List[str] = []
    tokens: List[str] = []
    for index, piece in enumerate(_SPLIT_RE.split(pattern)):
        # split() with one capturing group alternates literal, token, literal...
        if index % 2:
            tokens.append(piece)
            parts.append(_CAPTURE)
        elif piece:
            parts.append(re.escape(piece))
    regex = re.compile("".join(parts), re.DOTALL)
    return CompiledPattern(pattern=pattern, regex=regex, tokens=tuple(tokens))


class PatternCompiler:
    """Compiles patterns on demand and caches the results."""

    def __init__(self) -> None:
        self._pattern_cache: Dict[str, CompiledPattern] = {}

    def compile(self, pattern: str) -> CompiledPattern:
        """Fetch or compile the matcher for the pattern."""
        compiled = self._pattern_cache.get(pattern)
        if compiled is None:
            compiled = compile_pattern(pattern)
            self._pattern_cache[pattern] = compiled
        return compiled
