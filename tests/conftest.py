"""Shared fixtures for the related file finder tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Set

import pytest
import yaml

from related_files.config import GroupRegistry, default_registry


class FakeFilesystem:
    """In-memory stand-in for the existence check that records every lookup."""

    def __init__(self, existing: Iterable[str] = ()) -> None:
        self.existing: Set[str] = set(existing)
        self.checked = []

    def add(self, *paths: str) -> None:
        self.existing.update(paths)

    def __call__(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.existing


@pytest.fixture
def registry() -> GroupRegistry:
    return GroupRegistry()


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    return FakeFilesystem()


@pytest.fixture
def clean_default_registry():
    registry = default_registry()
    registry.clear()
    yield registry
    registry.clear()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict], Path]:
    def _write(data: dict, name: str = "related.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging so handlers never outlive the streams they wrap."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
