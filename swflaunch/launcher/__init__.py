"""Runtime launchers handed to the SWF debugging engine."""

from swflaunch.launcher.base import Launcher
from swflaunch.launcher.bundle import APP_BUNDLE_SUFFIX
from swflaunch.launcher.bundle import resolve_bundle_executable
from swflaunch.launcher.custom_runtime import CustomRuntimeLauncher
from swflaunch.launcher.spawner import DEFAULT_SPAWNER
from swflaunch.launcher.spawner import ProcessSpawner
from swflaunch.launcher.spawner import SubprocessSpawner

__all__ = [
    "APP_BUNDLE_SUFFIX",
    "DEFAULT_SPAWNER",
    "CustomRuntimeLauncher",
    "Launcher",
    "ProcessSpawner",
    "SubprocessSpawner",
    "resolve_bundle_executable",
]
