"""macOS application bundle resolution.

Users tend to point ``runtimeExecutable`` at ``Flash Player.app`` rather than
the binary inside it, so a path ending in ``.app`` is looked into for its
``Contents/MacOS`` executable. The check is keyed on the suffix alone and
runs on every platform.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

APP_BUNDLE_SUFFIX = ".app"
BUNDLE_EXECUTABLE_DIR = os.path.join("Contents", "MacOS")


def bundle_entries(path: str) -> list[str]:
    """Return the names inside ``<path>/Contents/MacOS`` in listing order.

    A missing or unreadable directory yields an empty list.
    """
    directory = os.path.join(path, BUNDLE_EXECUTABLE_DIR)
    if not os.path.isdir(directory):
        return []
    try:
        return os.listdir(directory)
    except OSError:
        logger.debug("Could not list %s", directory, exc_info=True)
        return []


def resolve_bundle_executable(path: str) -> str:
    """Return the executable to spawn for ``path``.

    For a ``.app`` bundle this is the absolute path of the first entry of
    ``Contents/MacOS`` as the directory listing returns it. Any other path,
    and any bundle without that directory or with an empty one, comes back
    exactly as given.
    """
    if not path.endswith(APP_BUNDLE_SUFFIX):
        return path

    entries = bundle_entries(path)
    if not entries:
        logger.debug("No executable found inside bundle %s", path)
        return path

    if len(entries) > 1:
        # listing order is unspecified; first entry wins
        logger.debug("Bundle %s has several candidates %s, using %s", path, entries, entries[0])

    resolved = os.path.abspath(os.path.join(path, BUNDLE_EXECUTABLE_DIR, entries[0]))
    logger.debug("Resolved bundle %s to %s", path, resolved)
    return resolved
