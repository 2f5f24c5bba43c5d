"""Linux controllers — xrandr, paplay and direct shell launches.

WslController covers a Linux userland running under Windows: brightness is
set on the Windows host through ``powershell.exe``; everything else behaves
like native Linux.
"""

from typing import List, Optional

from hardware_control.adapters.base import BaseController, fraction
from hardware_control.adapters.windows import set_brightness_command
from hardware_control.domain.errors import ExecutionError, UnsupportedOperation
from hardware_control.domain.models import ExternalCommand, Platform

# xrandr only reports its software gamma, not the panel backlight.
READ_UNSUPPORTED = "reading brightness is not supported on Linux"


def connected_outputs(xrandr_output: str) -> List[str]:
    """Names of outputs reported as ``connected`` by ``xrandr --query``."""
    outputs = []
    for line in xrandr_output.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[1] == "connected":
            outputs.append(parts[0])
    return outputs


class LinuxController(BaseController):
    platform = Platform.LINUX

    def display_query_command(self) -> ExternalCommand:
        return ExternalCommand("xrandr", ("--query",), capture_output=True)

    def brightness_commands(self, level: int, display: Optional[str] = None) -> List[ExternalCommand]:
        if not display:
            raise ValueError("xrandr needs an output name")
        return [ExternalCommand("xrandr", ("--output", display, "--brightness", fraction(level)))]

    def read_brightness_command(self) -> ExternalCommand:
        raise UnsupportedOperation(READ_UNSUPPORTED)

    def parse_brightness(self, output: str) -> int:
        raise UnsupportedOperation(READ_UNSUPPORTED)

    async def target_display(self) -> Optional[str]:
        outputs = connected_outputs(await self.runner.run(self.display_query_command()))
        if not outputs:
            raise ExecutionError("no connected displays found")
        return outputs[0]

    def sound_command(self, sound_type: str) -> ExternalCommand:
        # No per-type sounds on Linux.
        return ExternalCommand("paplay", (self.config.linux_sound_file,))

    def launch_command(self, app_name: str) -> ExternalCommand:
        return ExternalCommand.shell(app_name, wait_for_exit=False)


class WslController(LinuxController):
    platform = Platform.WSL
    powershell = "powershell.exe"

    async def target_display(self) -> Optional[str]:
        # WMI addresses the built-in panel; there is no X display to query.
        return None

    def brightness_commands(self, level: int, display: Optional[str] = None) -> List[ExternalCommand]:
        return [set_brightness_command(self.powershell, level)]
