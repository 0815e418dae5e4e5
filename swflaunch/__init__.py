"""swflaunch - custom SWF runtime launcher for debugging engines."""

from swflaunch.config import LauncherConfig
from swflaunch.launcher import CustomRuntimeLauncher
from swflaunch.launcher import Launcher

__all__ = ["CustomRuntimeLauncher", "Launcher", "LauncherConfig", "__version__"]
__version__ = "0.1.0"
