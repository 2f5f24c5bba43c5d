"""Port interfaces (Hexagonal Architecture)."""

from hardware_control.ports.outbound import CommandRunner, HardwareController

__all__ = [
    "CommandRunner",
    "HardwareController",
]
