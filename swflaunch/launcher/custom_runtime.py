"""Launch the SWF runtime from a user supplied executable.

When a launch configuration names ``runtimeExecutable`` (and optionally
``runtimeArgs``) the debugging engine must not discover Flash Player or ADL
on its own. It delegates to :class:`CustomRuntimeLauncher` instead, handing
over the argv it would have used.

The engine is not consistent about that argv. For AIR applications it puts
its own guess at the ADL path in ``cmd[0]``; for Flash Player it passes only
the arguments. ``app_host`` tells the launcher which of the two it is
looking at.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from swflaunch.launcher.bundle import resolve_bundle_executable
from swflaunch.launcher.spawner import DEFAULT_SPAWNER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from swflaunch.launcher.spawner import ProcessSpawner

logger = logging.getLogger(__name__)


class CustomRuntimeLauncher:
    """Launcher that spawns a caller chosen runtime executable.

    Args:
        runtime_executable: Path to the runtime binary, or to a macOS
            ``.app`` bundle containing it.
        runtime_args: Extra arguments appended to every launch.
        spawner: Process spawner, defaults to :data:`DEFAULT_SPAWNER`.

    Set :attr:`app_host` before the first launch when the runtime is ADL.
    """

    app_host: bool

    def __init__(
        self,
        runtime_executable: str,
        runtime_args: Sequence[str] | None = None,
        *,
        spawner: ProcessSpawner | None = None,
    ) -> None:
        self._runtime_executable = resolve_bundle_executable(runtime_executable)
        self._runtime_args = tuple(runtime_args or ())
        self._spawner = spawner if spawner is not None else DEFAULT_SPAWNER
        self.app_host = False

    @property
    def runtime_executable(self) -> str:
        """The binary actually spawned."""
        return self._runtime_executable

    @property
    def runtime_args(self) -> tuple[str, ...]:
        return self._runtime_args

    @property
    def is_air(self) -> bool:
        """Alias of :attr:`app_host` using the engine's naming."""
        return self.app_host

    @is_air.setter
    def is_air(self, value: bool) -> None:
        self.app_host = value

    def build_argv(self, cmd: Sequence[str]) -> list[str]:
        """Rewrite the engine's argv into the one to spawn."""
        if self.app_host:
            # drop the engine's own ADL path
            passthrough = list(cmd[1:])
        else:
            passthrough = list(cmd)
        return [self._runtime_executable, *passthrough, *self._runtime_args]

    def launch(self, cmd: Sequence[str]) -> Any:
        argv = self.build_argv(cmd)
        logger.debug(
            "Launching %s runtime: %s",
            "AIR" if self.app_host else "Flash Player",
            argv,
        )
        return self._spawner.spawn(argv)

    def terminate(self, process: Any) -> None:
        """Request a graceful exit. Does not kill, wait or reap."""
        process.terminate()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._runtime_executable!r}, "
            f"{list(self._runtime_args)!r}, app_host={self.app_host!r})"
        )
