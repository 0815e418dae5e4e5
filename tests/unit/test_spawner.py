"""Tests for the subprocess backed spawner."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from swflaunch.launcher import DEFAULT_SPAWNER
from swflaunch.launcher import CustomRuntimeLauncher
from swflaunch.launcher import ProcessSpawner
from swflaunch.launcher import SubprocessSpawner


def test_default_spawner_is_subprocess_spawner() -> None:
    assert isinstance(DEFAULT_SPAWNER, SubprocessSpawner)
    assert isinstance(DEFAULT_SPAWNER, ProcessSpawner)


def test_spawn_passes_argv_without_shell() -> None:
    with patch("swflaunch.launcher.spawner.subprocess.Popen") as popen:
        result = SubprocessSpawner().spawn(["/rt", "a b.swf", "$HOME"])

    popen.assert_called_once_with(["/rt", "a b.swf", "$HOME"])
    assert result is popen.return_value


def test_launcher_uses_default_spawner_when_none_injected() -> None:
    with patch("swflaunch.launcher.spawner.subprocess.Popen") as popen:
        CustomRuntimeLauncher("/rt", ["-x"]).launch(["a.swf"])

    popen.assert_called_once_with(["/rt", "a.swf", "-x"])


def test_missing_executable_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        SubprocessSpawner().spawn([str(tmp_path / "no-such-runtime")])


def test_launch_and_terminate_real_process() -> None:
    launcher = CustomRuntimeLauncher(sys.executable, ["-c", "import time; time.sleep(30)"])
    launcher.app_host = True

    process = launcher.launch(["/default/runtime"])
    try:
        assert isinstance(process, subprocess.Popen)
        assert process.args == [sys.executable, "-c", "import time; time.sleep(30)"]
        launcher.terminate(process)
        assert process.wait(timeout=10) is not None
    finally:
        if process.poll() is None:
            process.kill()
            process.wait()


def test_terminate_after_exit_does_not_raise() -> None:
    launcher = CustomRuntimeLauncher(sys.executable, ["-c", "pass"])

    process = launcher.launch([])
    process.wait(timeout=10)

    launcher.terminate(process)
