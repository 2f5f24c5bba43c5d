"""Global state for MCP server — wires config, platform and controller once."""

from __future__ import annotations

import sys
from typing import Optional

from hardware_control.adapters import create_controller
from hardware_control.config import AppConfig
from hardware_control.dispatcher import ToolDispatcher
from hardware_control.domain.models import Platform
from hardware_control.domain.platform import detect, parse_platform
from hardware_control.executor import CommandExecutor


def _log(msg: str):
    print(msg, file=sys.stderr)


def resolve_platform(override: Optional[str]) -> Platform:
    """Use the configured platform if valid, otherwise detect it."""
    if override:
        try:
            return parse_platform(override)
        except ValueError as e:
            _log(f"{e}; falling back to auto-detection")
    return detect()


class AppState:
    """Process-wide objects. The platform never changes after construction."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig.from_env()
        self.platform = resolve_platform(self.config.platform_override)
        self.executor = CommandExecutor(
            timeout=self.config.executor.timeout_seconds,
            log_commands=self.config.executor.log_commands,
        )
        self.controller = create_controller(self.platform, self.executor, self.config.hardware)
        self.dispatcher = ToolDispatcher(self.controller)
        _log(f"hardware-control state initialized for {self.platform.value}.")


# Module-level singleton
_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state
