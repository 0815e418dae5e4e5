"""
TypedDicts for the DAP ``launch`` request fields that select a custom SWF
runtime. Only the fields swflaunch reads are listed.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Literal
from typing import TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired


class LaunchRequestArguments(TypedDict, total=False):
    """Arguments for the `launch` request.

    ``program`` is the SWF file or, for AIR, the application descriptor XML.
    """
    program: str
    args: NotRequired[list[str]]
    noDebug: NotRequired[bool]

    # custom runtime fields (camelCase only)
    runtimeExecutable: NotRequired[str]
    runtimeArgs: NotRequired[list[str]]
    appHost: NotRequired[bool]


class LaunchRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: Literal["launch"]
    arguments: LaunchRequestArguments
