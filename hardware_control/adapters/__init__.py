"""Platform controllers — one HardwareController per OS family."""

from typing import Optional

from hardware_control.adapters.base import BaseController
from hardware_control.adapters.linux import LinuxController, WslController
from hardware_control.adapters.macos import MacController
from hardware_control.adapters.windows import WindowsController
from hardware_control.config import HardwareConfig
from hardware_control.domain.models import Platform
from hardware_control.ports.outbound import CommandRunner

CONTROLLERS = {
    Platform.WINDOWS: WindowsController,
    Platform.MACOS: MacController,
    Platform.LINUX: LinuxController,
    Platform.WSL: WslController,
}


def create_controller(
    platform: Platform,
    runner: CommandRunner,
    config: Optional[HardwareConfig] = None,
) -> BaseController:
    """Create the controller for ``platform``."""
    try:
        cls = CONTROLLERS[platform]
    except KeyError:
        raise ValueError(f"Unsupported platform: {platform}") from None
    return cls(runner, config)


__all__ = [
    "BaseController",
    "CONTROLLERS",
    "LinuxController",
    "MacController",
    "WindowsController",
    "WslController",
    "create_controller",
]
