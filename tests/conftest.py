from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from swflaunch.config import reset_config

logger = logging.getLogger(__name__)


class FakeProcess:
    """Stand-in for a process handle that records terminate requests."""

    def __init__(self, argv: list[str]) -> None:
        self.argv = argv
        self.terminate_calls = 0
        self.kill_calls = 0
        self.wait_calls = 0

    def terminate(self) -> None:
        self.terminate_calls += 1

    def kill(self) -> None:
        self.kill_calls += 1

    def wait(self, timeout: float | None = None) -> int:
        self.wait_calls += 1
        return 0


class RecordingSpawner:
    """Spawner that records every argv instead of starting a process."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def spawn(self, argv: list[str]) -> Any:
        self.calls.append(argv)
        return FakeProcess(argv)

    @property
    def last_argv(self) -> list[str]:
        return self.calls[-1]


@pytest.fixture
def spawner() -> RecordingSpawner:
    return RecordingSpawner()


@pytest.fixture
def make_bundle(tmp_path: Path):
    """Create ``<tmp>/<name>`` with the given ``Contents/MacOS`` entries."""

    def _make(name: str = "Foo.app", entries: tuple[str, ...] = ("Foo",)) -> Path:
        bundle = tmp_path / name
        macos = bundle / "Contents" / "MacOS"
        macos.mkdir(parents=True)
        for entry in entries:
            (macos / entry).write_text("#!/bin/sh\n")
        return bundle

    return _make


@pytest.fixture(autouse=True)
def _reset_launcher_config():
    yield
    reset_config()
