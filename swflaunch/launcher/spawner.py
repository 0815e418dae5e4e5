"""Process spawning used by launchers.

The spawner is injected into launchers so they can be exercised without
forking real children; tests pass a fake that records the argv.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Any
from typing import Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ProcessSpawner(Protocol):
    """Starts a child process from an argv vector."""

    def spawn(self, argv: list[str]) -> Any:
        """Start ``argv`` without a shell and return the process handle."""
        ...


class SubprocessSpawner:
    """Spawn children with :class:`subprocess.Popen`.

    The child inherits the working directory, environment and standard
    streams of the current process. Spawn failures propagate as raised by
    ``Popen``.
    """

    def spawn(self, argv: list[str]) -> subprocess.Popen:
        logger.debug("Spawning %s", argv)
        return subprocess.Popen(argv)


DEFAULT_SPAWNER = SubprocessSpawner()
