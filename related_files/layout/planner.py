"""Pane layouts for resolved sets of two to four files.

Panes are opened in group order. Each layout names its slots and picks the
slot that receives focus once every pane is open, based on which entry (if
any) is the file the user started from:

* two files: ``left`` | ``right``. Focus goes to ``right`` when the original
  is the left file, otherwise it stays on the pane opened last.
* three files: ``left`` beside ``right_top`` / ``right_bottom``. Focus defaults
  to ``right_bottom``; ``right_top`` when the original is the left file and
  ``left`` when the original is the right-top file.
* four files: ``left_top`` / ``left_bottom`` beside ``right_top`` /
  ``right_bottom``. Focus defaults to ``right_bottom``; ``right_top`` when the
  original is left-top and ``left_top`` when the original is right-top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from ..exceptions import RelatedFilesError

LEFT = "left"
RIGHT = "right"
LEFT_TOP = "left_top"
LEFT_BOTTOM = "left_bottom"
RIGHT_TOP = "right_top"
RIGHT_BOTTOM = "right_bottom"

SLOTS: Dict[int, Tuple[str, ...]] = {
    2: (LEFT, RIGHT),
    3: (LEFT, RIGHT_TOP, RIGHT_BOTTOM),
    4: (LEFT_TOP, LEFT_BOTTOM, RIGHT_TOP, RIGHT_BOTTOM),
}

# original index -> focused slot; missing keys fall back to DEFAULT_FOCUS
FOCUS_RULES: Dict[int, Dict[int, str]] = {
    2: {0: RIGHT},
    3: {0: RIGHT_TOP, 1: LEFT},
    4: {0: RIGHT_TOP, 1: RIGHT_BOTTOM, 2: LEFT_TOP},
}

DEFAULT_FOCUS: Dict[int, str] = {
    2: RIGHT,
    3: RIGHT_BOTTOM,
    4: RIGHT_BOTTOM,
}


@dataclass(frozen=True)
class Pane:
    slot: str
    path: str
    index: int


@dataclass(frozen=True)
class LayoutPlan:
    """Ordered panes plus the slot that should end up focused."""

    panes: Tuple[Pane, ...]
    focus: str
    original_index: Optional[int] = None

    @property
    def focused_pane(self) -> Pane:
        for pane in self.panes:
            if pane.slot == self.focus:
                return pane
        raise RelatedFilesError(f"Focus slot '{self.focus}' is not part of the layout.")

    def as_dict(self) -> Dict[str, object]:
        return {
            "panes": [{"slot": pane.slot, "path": pane.path, "index": pane.index} for pane in self.panes],
            "focus": self.focus,
            "original_index": self.original_index,
        }


def plan_layout(paths: Sequence[str], original_index: Optional[int] = None) -> LayoutPlan:
    """Assign each path to its slot and choose the focused slot."""
    count = len(paths)
    slots = SLOTS.get(count)
    if slots is None:
        raise RelatedFilesError(f"No layout exists for {count} files; expected 2, 3 or 4.")
    if original_index is not None and not 0 <= original_index < count:
        raise RelatedFilesError(f"Original index {original_index} is outside a layout of {count} files.")

    panes = tuple(Pane(slot=slot, path=path, index=index) for index, (slot, path) in enumerate(zip(slots, paths)))
    focus = DEFAULT_FOCUS[count]
    if original_index is not None:
        focus = FOCUS_RULES[count].get(original_index, focus)
    return LayoutPlan(panes=panes, focus=focus, original_index=original_index)
