"""Pane layout planning and presentation."""

from .planner import LayoutPlan, Pane, plan_layout
from .presenter import EchoLayoutPresenter, LayoutPresenter

__all__ = ["LayoutPlan", "Pane", "plan_layout", "LayoutPresenter", "EchoLayoutPresenter"]
