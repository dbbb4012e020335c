"""Utility helpers for the related file finder."""

from .logger import configure_logging
from .report import ReportGenerator

__all__ = ["configure_logging", "ReportGenerator"]
