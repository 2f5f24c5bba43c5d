"""hardware-control — MCP tools for display brightness, sounds and app launching."""

from hardware_control.adapters import create_controller
from hardware_control.config import AppConfig, __version__
from hardware_control.dispatcher import ToolDispatcher
from hardware_control.domain import (
    ActionOutcome,
    ExecutionError,
    GetBrightness,
    OpenApp,
    Platform,
    PlaySound,
    SetBrightness,
    detect,
)
from hardware_control.executor import CommandExecutor

__all__ = [
    "__version__",
    "ActionOutcome",
    "AppConfig",
    "CommandExecutor",
    "ExecutionError",
    "GetBrightness",
    "OpenApp",
    "Platform",
    "PlaySound",
    "SetBrightness",
    "ToolDispatcher",
    "create_controller",
    "detect",
]
