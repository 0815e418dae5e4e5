"""Launcher configuration built from a DAP ``launch`` request."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

from swflaunch.errors import ConfigurationError
from swflaunch.launcher.custom_runtime import CustomRuntimeLauncher

if TYPE_CHECKING:
    from swflaunch.launcher.spawner import ProcessSpawner
    from swflaunch.protocol.requests import LaunchRequest

AIR_DESCRIPTOR_SUFFIX = ".xml"


@dataclass
class LauncherConfig:
    """Custom runtime settings for one launch configuration.

    ``runtime_executable`` of ``None`` means the engine should find the
    runtime itself and no custom launcher is created.
    """

    runtime_executable: str | None = None
    runtime_args: list[str] = field(default_factory=list)
    app_host: bool = False

    @classmethod
    def from_launch_request(cls, request: LaunchRequest) -> LauncherConfig:
        """Create config from launch request arguments.

        The runtime is treated as ADL when ``appHost`` is true, or when it is
        absent and ``program`` names an AIR application descriptor.
        """
        args = request.get("arguments", {})

        app_host = args.get("appHost")
        if app_host is None:
            app_host = (args.get("program") or "").endswith(AIR_DESCRIPTOR_SUFFIX)

        runtime_args = args.get("runtimeArgs", [])
        if isinstance(runtime_args, (list, tuple)):
            runtime_args = list(runtime_args)
        # anything else is kept as given so validate() can reject it
        return cls(
            runtime_executable=args.get("runtimeExecutable"),
            runtime_args=runtime_args,
            app_host=app_host,
        )

    @property
    def uses_custom_runtime(self) -> bool:
        return self.runtime_executable is not None

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if self.runtime_executable is not None:
            if not isinstance(self.runtime_executable, str):
                raise ConfigurationError(
                    "Runtime executable must be a string",
                    config_key="runtimeExecutable",
                    details={"value": self.runtime_executable},
                )
            if not self.runtime_executable:
                raise ConfigurationError(
                    "Runtime executable must not be empty",
                    config_key="runtimeExecutable",
                )

        if not isinstance(self.runtime_args, (list, tuple)):
            raise ConfigurationError(
                "Runtime arguments must be a list of strings",
                config_key="runtimeArgs",
                details={"value": self.runtime_args},
            )

        bad_args = [arg for arg in self.runtime_args if not isinstance(arg, str)]
        if bad_args:
            raise ConfigurationError(
                "Runtime arguments must be strings",
                config_key="runtimeArgs",
                details={"invalid": bad_args},
            )

        if not isinstance(self.app_host, bool):
            raise ConfigurationError(
                "appHost must be a boolean",
                config_key="appHost",
                details={"value": self.app_host},
            )

    def create_launcher(
        self,
        spawner: ProcessSpawner | None = None,
    ) -> CustomRuntimeLauncher | None:
        """Build the launcher to hand to the engine, or ``None`` for its default."""
        self.validate()
        if self.runtime_executable is None:
            return None

        launcher = CustomRuntimeLauncher(
            self.runtime_executable,
            self.runtime_args,
            spawner=spawner,
        )
        launcher.app_host = self.app_host
        return launcher


# Default configuration instance
DEFAULT_CONFIG = LauncherConfig()
