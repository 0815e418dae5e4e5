"""The launcher capability consumed by the SWF debugging engine."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Launcher(Protocol):
    """Pluggable replacement for the engine's own runtime launch.

    The engine hands ``launch`` the argument vector it prepared for its
    default launch and later passes the returned handle back to
    ``terminate``. Both may raise ``OSError``.
    """

    def launch(self, cmd: Sequence[str]) -> Any:
        """Start the runtime and return its process handle."""
        ...

    def terminate(self, process: Any) -> None:
        """Ask a previously launched runtime to exit."""
        ...
