"""Pattern compilation, group matching, substitution and resolution."""

from .group_matcher import GroupMatcher
from .pattern_compiler import Bindings, CompiledPattern, PatternCompiler, compile_pattern
from .resolver import GroupResolver, ResolvedSet, path_exists, resolve
from .substitutor import apply, substitute

__all__ = [
    "Bindings",
    "CompiledPattern",
    "PatternCompiler",
    "compile_pattern",
    "GroupMatcher",
    "apply",
    "substitute",
    "GroupResolver",
    "ResolvedSet",
    "path_exists",
    "resolve",
]
