"""OS family detection."""

import sys
from pathlib import Path
from typing import Optional, Union

from hardware_control.domain.models import Platform

WSL_MARKER = "microsoft"
PROC_VERSION = "/proc/version"

PLATFORM_ALIASES = {
    "windows": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "macos": Platform.MACOS,
    "darwin": Platform.MACOS,
    "linux": Platform.LINUX,
    "wsl": Platform.WSL,
}


def _is_wsl(version_file: Union[str, Path]) -> bool:
    try:
        content = Path(version_file).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False
    return WSL_MARKER in content.lower()


def detect(
    system: Optional[str] = None,
    version_file: Union[str, Path] = PROC_VERSION,
) -> Platform:
    """Classify the running OS.

    Args:
        system: OS identifier, defaults to ``sys.platform``.
        version_file: Kernel version file consulted on Linux only. A Microsoft
            kernel string means the Linux userland runs under Windows (WSL).
    """
    system = (system if system is not None else sys.platform).lower()

    if system in ("win32", "cygwin"):
        return Platform.WINDOWS
    if system == "darwin":
        return Platform.MACOS
    if system.startswith("linux") and _is_wsl(version_file):
        return Platform.WSL
    return Platform.LINUX


def parse_platform(name: str) -> Platform:
    """Resolve a configured platform name (e.g. HWCTL_PLATFORM)."""
    try:
        return PLATFORM_ALIASES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown platform: {name!r}") from None
