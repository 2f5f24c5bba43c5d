"""Shared plumbing for platform controllers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hardware_control.config import HardwareConfig
from hardware_control.domain.models import ExternalCommand, Platform
from hardware_control.ports.outbound import CommandRunner


class BaseController(ABC):
    """Runs the commands built by a subclass through a CommandRunner.

    Subclasses implement the pure builders; the async action methods here
    only execute and interpret them.
    """

    platform: Platform

    def __init__(self, runner: CommandRunner, config: Optional[HardwareConfig] = None):
        self.runner = runner
        self.config = config or HardwareConfig()

    # -- builders -------------------------------------------------------

    @abstractmethod
    def brightness_commands(self, level: int, display: Optional[str] = None) -> List[ExternalCommand]:
        """Fallback chain that sets brightness to ``level`` (0-100).

        ``display`` is whatever :meth:`target_display` resolved; platforms
        that address the panel implicitly ignore it.
        """

    @abstractmethod
    def read_brightness_command(self) -> ExternalCommand:
        ...

    @abstractmethod
    def parse_brightness(self, output: str) -> int:
        ...

    @abstractmethod
    def sound_command(self, sound_type: str) -> ExternalCommand:
        ...

    @abstractmethod
    def launch_command(self, app_name: str) -> ExternalCommand:
        ...

    # -- actions --------------------------------------------------------

    async def target_display(self) -> Optional[str]:
        """Display to adjust, for platforms that need one named."""
        return None

    async def set_brightness(self, level: int) -> None:
        display = await self.target_display()
        await self.runner.run_chain(self.brightness_commands(level, display))

    async def get_brightness(self) -> int:
        output = await self.runner.run(self.read_brightness_command())
        return self.parse_brightness(output)

    async def play_sound(self, sound_type: str) -> None:
        await self.runner.run(self.sound_command(sound_type))

    async def open_app(self, app_name: str) -> None:
        await self.runner.run(self.launch_command(app_name))


def fraction(level: int) -> str:
    """Format a 0-100 level as the 0.00-1.00 value display tools expect."""
    return f"{level / 100:.2f}"
