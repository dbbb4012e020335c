"""Command line entry point for the related file finder."""

from __future__ import annotations

import logging
from typing import Optional

import click

from . import __version__
from .config import default_registry
from .exceptions import RelatedFilesError
from .layout import EchoLayoutPresenter
from .main import RelatedFileFinder
from .utils import configure_logging

LOGGER = logging.getLogger(__name__)

EXIT_NO_MATCH = 1
EXIT_ERROR = 2


@click.command()
@click.argument("path")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to the YAML file declaring the pattern groups. Without it the process-wide registry is used.")
@click.option("--format", "output_format", type=click.Choice(EchoLayoutPresenter.FORMATS), default="paths", show_default=True, help="How to print the resolved files.")
@click.option("--layout/--no-layout", default=True, show_default=True, help="Plan panes and focus, or only print the resolved paths.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False), help="Override logging level.")
@click.version_option(version=__version__)
def main(path: str, config_path: Optional[str], output_format: str, layout: bool, log_level: Optional[str]) -> None:
    """Find the files related to PATH and print them in pane order."""
    presenter = EchoLayoutPresenter(output_format)
    try:
        if config_path:
            finder = RelatedFileFinder(config_path, presenter=presenter)
        else:
            finder = RelatedFileFinder(registry=default_registry(), presenter=presenter)
    except RelatedFilesError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        raise SystemExit(EXIT_ERROR) from exc

    if finder.config is not None:
        if log_level is not None:
            configure_logging(finder.config.get_logging_config(), level_override=log_level)
    else:
        configure_logging({}, level_override=log_level)

    if finder.run(path, layout=layout) is None:
        raise SystemExit(EXIT_NO_MATCH)


if __name__ == "__main__":
    main()
