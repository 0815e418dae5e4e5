"""Exception hierarchy for swflaunch.

Only the configuration layer raises these. Failures from the host process
spawning facility (``FileNotFoundError``, ``PermissionError`` and other
``OSError`` subclasses) are never wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class LauncherError(Exception):
    """Base exception for all swflaunch errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(LauncherError):
    """Raised when a launch configuration cannot produce a launcher."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key
