"""Outbound ports — interfaces for the OS-facing adapters."""

from typing import Protocol, Sequence, runtime_checkable

from hardware_control.domain.models import ExternalCommand, Platform


@runtime_checkable
class CommandRunner(Protocol):
    """Runs external programs. Raises ExecutionError on failure."""

    async def run(self, command: ExternalCommand) -> str: ...

    async def run_chain(self, commands: Sequence[ExternalCommand]) -> str: ...


@runtime_checkable
class HardwareController(Protocol):
    """Platform-specific implementation of the four hardware actions."""

    platform: Platform

    async def set_brightness(self, level: int) -> None: ...

    async def get_brightness(self) -> int: ...

    async def play_sound(self, sound_type: str) -> None: ...

    async def open_app(self, app_name: str) -> None: ...
