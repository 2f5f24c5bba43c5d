"""Routes action requests to the platform controller and flattens results to text."""

import sys
from datetime import datetime

from hardware_control.domain import messages
from hardware_control.domain.errors import ExecutionError, UnsupportedOperation
from hardware_control.domain.models import (
    ActionOutcome,
    ActionRequest,
    GetBrightness,
    OpenApp,
    PlaySound,
    SetBrightness,
)
from hardware_control.ports.outbound import HardwareController


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


class ToolDispatcher:
    """Executes one ActionRequest per call. Never raises.

    ExecutionError becomes a failure message; UnsupportedOperation becomes
    a successful response carrying a warning.
    """

    def __init__(self, controller: HardwareController):
        self.controller = controller
        self._handlers = {
            SetBrightness: ("setting brightness", self._set_brightness),
            GetBrightness: ("getting brightness", self._get_brightness),
            PlaySound: ("playing sound", self._play_sound),
            OpenApp: ("opening application", self._open_app),
        }

    @property
    def platform(self):
        return self.controller.platform

    async def dispatch(self, request: ActionRequest) -> ActionOutcome:
        action, handler = self._handlers[type(request)]
        try:
            outcome = await handler(request)
        except UnsupportedOperation:
            outcome = ActionOutcome.unsupported(messages.BRIGHTNESS_UNSUPPORTED)
        except ExecutionError as e:
            outcome = ActionOutcome.failure(messages.failure(action, e))
        except Exception as e:
            _log(f"Unexpected error while {action}: {e!r}")
            outcome = ActionOutcome.failure(messages.failure(action, e))

        _log(f"{type(request).__name__} on {self.platform.value}: {outcome.message}")
        return outcome

    async def _set_brightness(self, request: SetBrightness) -> ActionOutcome:
        await self.controller.set_brightness(request.level)
        return ActionOutcome.success(messages.brightness_set(request.level))

    async def _get_brightness(self, request: GetBrightness) -> ActionOutcome:
        level = await self.controller.get_brightness()
        return ActionOutcome.success(messages.brightness_current(level))

    async def _play_sound(self, request: PlaySound) -> ActionOutcome:
        await self.controller.play_sound(request.sound_type)
        return ActionOutcome.success(messages.sound_played(request.sound_type))

    async def _open_app(self, request: OpenApp) -> ActionOutcome:
        await self.controller.open_app(request.app_name)
        return ActionOutcome.success(messages.app_opened(request.app_name))
