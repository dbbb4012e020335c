"""Report generation utilities."""

from __future__ import annotations

import json
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..layout.planner import LayoutPlan
    from ..matching.resolver import ResolvedSet


class ReportGenerator:
    """Produces human-readable and JSON summaries of a resolution."""

    def build_text_report(self, resolved: ResolvedSet, plan: Optional[LayoutPlan] = None) -> str:
        lines: List[str] = []
        lines.append(f"Input: {resolved.source_path}")
        lines.append(f"Group: {resolved.group.describe()}")
        lines.append(f"Matched Pattern: {resolved.group.patterns[resolved.matched_index]}")
        if len(resolved.bindings):
            bound = ", ".join(f"{token}={value!r}" for token, value in resolved.bindings.pairs)
            lines.append(f"Bindings: {bound}")
        lines.append("-" * 40)

        slots = {pane.index: pane.slot for pane in plan.panes} if plan is not None else {}
        for index, path in enumerate(resolved.paths):
            markers = []
            if index == resolved.original_index:
                markers.append("original")
            if plan is not None and slots.get(index) == plan.focus:
                markers.append("focus")
            slot = f"[{slots[index]}] " if index in slots else ""
            suffix = f" ({', '.join(markers)})" if markers else ""
            lines.append(f"  {index + 1}. {slot}{path}{suffix}")

        return "\n".join(lines)

    def build_json_report(self, resolved: ResolvedSet, plan: Optional[LayoutPlan] = None) -> Dict[str, object]:
        report: Dict[str, object] = {
            "input": resolved.source_path,
            "group": {
                "name": resolved.group.name,
                "patterns": list(resolved.group.patterns),
            },
            "matched_index": resolved.matched_index,
            "original_index": resolved.original_index,
            "bindings": resolved.bindings.as_dict(),
            "paths": list(resolved.paths),
        }
        if plan is not None:
            report["layout"] = plan.as_dict()
        return report

    def render_json(self, resolved: ResolvedSet, plan: Optional[LayoutPlan] = None) -> str:
        return json.dumps(self.build_json_report(resolved, plan), indent=2)
