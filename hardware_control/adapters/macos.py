"""macOS controller — brightness CLI with AppleScript fallback, afplay, open."""

import math
import os
from typing import List, Optional

from hardware_control.adapters.base import BaseController, fraction
from hardware_control.domain.errors import ExecutionError
from hardware_control.domain.models import ExternalCommand, Platform
from hardware_control.domain.sounds import DEFAULT_SOUND, MACOS_SOUNDS

SET_BRIGHTNESS_SCRIPT = (
    'tell application "System Events" to set brightness of item 1 of (get displays) to {value}'
)
GET_BRIGHTNESS_SCRIPT = 'tell application "System Events" to get brightness of item 1 of (get displays)'


def osascript(script: str, **kwargs) -> ExternalCommand:
    return ExternalCommand("osascript", ("-e", script), **kwargs)


class MacController(BaseController):
    platform = Platform.MACOS

    def brightness_commands(self, level: int, display: Optional[str] = None) -> List[ExternalCommand]:
        value = fraction(level)
        return [
            ExternalCommand("brightness", (value,)),
            osascript(SET_BRIGHTNESS_SCRIPT.format(value=value)),
        ]

    def read_brightness_command(self) -> ExternalCommand:
        return osascript(GET_BRIGHTNESS_SCRIPT, capture_output=True)

    def parse_brightness(self, output: str) -> int:
        try:
            value = float(output.strip())
        except ValueError:
            raise ExecutionError(f"unexpected brightness output: {output!r}") from None
        return int(math.floor(value * 100 + 0.5))

    def sound_path(self, sound_type: str) -> str:
        name = MACOS_SOUNDS.get(sound_type, MACOS_SOUNDS[DEFAULT_SOUND])
        return os.path.join(self.config.macos_sound_dir, name)

    def sound_command(self, sound_type: str) -> ExternalCommand:
        return ExternalCommand("afplay", (self.sound_path(sound_type),))

    def launch_command(self, app_name: str) -> ExternalCommand:
        return ExternalCommand("open", ("-a", app_name), wait_for_exit=False)
