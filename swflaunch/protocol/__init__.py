"""DAP request shapes read by swflaunch."""

from swflaunch.protocol.requests import LaunchRequest
from swflaunch.protocol.requests import LaunchRequestArguments

__all__ = ["LaunchRequest", "LaunchRequestArguments"]
