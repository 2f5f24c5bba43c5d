"""Configuration loaded from the environment (.env supported)."""

__version__ = "1.0.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from hardware_control.domain.platform import PLATFORM_ALIASES

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SERVER_NAME = "hardware-control"

DEFAULT_COMMAND_TIMEOUT = 30.0
DEFAULT_LINUX_SOUND = "/usr/share/sounds/freedesktop/stereo/complete.oga"
DEFAULT_MACOS_SOUND_DIR = "/System/Library/Sounds"

SUPPORTED_PLATFORM_OVERRIDES = tuple(PLATFORM_ALIASES)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> Optional[float]:
    raw = os.getenv(name, str(DEFAULT_COMMAND_TIMEOUT)).strip()
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {DEFAULT_COMMAND_TIMEOUT}s")
        return DEFAULT_COMMAND_TIMEOUT
    # 0 (or negative) means wait forever
    return value if value > 0 else None


PLATFORM_OVERRIDE = os.getenv("HWCTL_PLATFORM", "").strip().lower() or None
if PLATFORM_OVERRIDE and PLATFORM_OVERRIDE not in SUPPORTED_PLATFORM_OVERRIDES:
    _stderr_print(f"Unsupported HWCTL_PLATFORM={PLATFORM_OVERRIDE!r}, using auto-detection")
    PLATFORM_OVERRIDE = None

COMMAND_TIMEOUT = _env_timeout("HWCTL_COMMAND_TIMEOUT")
LOG_COMMANDS = _env_flag("HWCTL_LOG_COMMANDS")
LINUX_SOUND = os.getenv("HWCTL_LINUX_SOUND", DEFAULT_LINUX_SOUND)
MACOS_SOUND_DIR = os.getenv("HWCTL_MACOS_SOUND_DIR", DEFAULT_MACOS_SOUND_DIR)


@dataclass
class ExecutorConfig:
    timeout_seconds: Optional[float] = DEFAULT_COMMAND_TIMEOUT
    log_commands: bool = False


@dataclass
class HardwareConfig:
    linux_sound_file: str = DEFAULT_LINUX_SOUND
    macos_sound_dir: str = DEFAULT_MACOS_SOUND_DIR


@dataclass
class AppConfig:
    """Typed server configuration."""

    server_name: str = SERVER_NAME
    version: str = __version__
    platform_override: Optional[str] = None
    executor: ExecutorConfig = field(default_factory=ExecutorConfig)
    hardware: HardwareConfig = field(default_factory=HardwareConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            platform_override=PLATFORM_OVERRIDE,
            executor=ExecutorConfig(
                timeout_seconds=COMMAND_TIMEOUT,
                log_commands=LOG_COMMANDS,
            ),
            hardware=HardwareConfig(
                linux_sound_file=LINUX_SOUND,
                macos_sound_dir=MACOS_SOUND_DIR,
            ),
        )
