"""Presentation boundary for resolved layouts."""

from __future__ import annotations

import abc
import logging
from typing import Optional

import click

from ..matching.resolver import ResolvedSet
from ..utils.report import ReportGenerator
from .planner import LayoutPlan

LOGGER = logging.getLogger(__name__)


class LayoutPresenter(abc.ABC):
    """Realizes a resolved set, for example by opening editor panes.

    ``plan`` is None when the caller asked for the paths without a layout.
    """

    @abc.abstractmethod
    def present(self, resolved: ResolvedSet, plan: Optional[LayoutPlan]) -> None:
        raise NotImplementedError


class EchoLayoutPresenter(LayoutPresenter):
    """Writes the plan to stdout, as plain paths, a text report or JSON."""

    FORMATS = ("paths", "text", "json")

    def __init__(self, output_format: str = "paths", report_generator: Optional[ReportGenerator] = None) -> None:
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format '{output_format}'")
        self.output_format = output_format
        self.report_generator = report_generator or ReportGenerator()

    def present(self, resolved: ResolvedSet, plan: Optional[LayoutPlan]) -> None:
        if plan is not None:
            LOGGER.debug("Presenting %s pane(s), focus on %s", len(plan.panes), plan.focus)
        if self.output_format == "json":
            click.echo(self.report_generator.render_json(resolved, plan))
        elif self.output_format == "text":
            click.echo(self.report_generator.build_text_report(resolved, plan))
        else:
            for path in resolved.paths:
                click.echo(path)
