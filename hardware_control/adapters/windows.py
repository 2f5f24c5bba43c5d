"""Windows controller — PowerShell/WMI and the shell ``start`` launcher."""

from typing import List, Optional

from hardware_control.adapters.base import BaseController
from hardware_control.domain.errors import ExecutionError
from hardware_control.domain.models import ExternalCommand, Platform
from hardware_control.domain.sounds import DEFAULT_SOUND, WINDOWS_BEEPS

SET_BRIGHTNESS_SCRIPT = (
    "(Get-WmiObject -Namespace root/WMI -Class WmiMonitorBrightnessMethods)"
    ".WmiSetBrightness(1,{level})"
)
GET_BRIGHTNESS_SCRIPT = (
    "(Get-WmiObject -Namespace root/WMI -Class WmiMonitorBrightness).CurrentBrightness"
)
BEEP_SCRIPT = "[console]::beep({frequency},{duration})"


def powershell_command(executable: str, script: str, **kwargs) -> ExternalCommand:
    return ExternalCommand(executable, ("-Command", script), **kwargs)


def set_brightness_command(executable: str, level: int) -> ExternalCommand:
    return powershell_command(executable, SET_BRIGHTNESS_SCRIPT.format(level=level))


class WindowsController(BaseController):
    platform = Platform.WINDOWS
    powershell = "powershell"

    def brightness_commands(self, level: int, display: Optional[str] = None) -> List[ExternalCommand]:
        return [set_brightness_command(self.powershell, level)]

    def read_brightness_command(self) -> ExternalCommand:
        return powershell_command(self.powershell, GET_BRIGHTNESS_SCRIPT, capture_output=True)

    def parse_brightness(self, output: str) -> int:
        # One line per monitor; the first one is the primary panel.
        lines = [line.strip() for line in output.splitlines() if line.strip()]
        try:
            return int(lines[0])
        except (IndexError, ValueError):
            raise ExecutionError(f"unexpected brightness output: {output!r}") from None

    def sound_command(self, sound_type: str) -> ExternalCommand:
        frequency, duration = WINDOWS_BEEPS.get(sound_type, WINDOWS_BEEPS[DEFAULT_SOUND])
        return powershell_command(self.powershell, BEEP_SCRIPT.format(frequency=frequency, duration=duration))

    def launch_command(self, app_name: str) -> ExternalCommand:
        # `start` is a cmd builtin; the empty string is the window title slot.
        return ExternalCommand("cmd", ("/c", "start", "", app_name), wait_for_exit=False)
