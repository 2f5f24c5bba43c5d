"""Notification sound tables, keyed by sound type."""

from typing import Dict, Optional, Tuple

SOUND_TYPES = ("beep", "alert", "success", "error", "default")
DEFAULT_SOUND = "default"

# (frequency Hz, duration ms) for [console]::beep
WINDOWS_BEEPS: Dict[str, Tuple[int, int]] = {
    "beep": (1000, 500),
    "alert": (800, 300),
    "success": (1200, 200),
    "error": (400, 500),
    "default": (1000, 500),
}

# File names under the macOS system sound directory
MACOS_SOUNDS: Dict[str, str] = {
    "beep": "Ping.aiff",
    "alert": "Sosumi.aiff",
    "success": "Glass.aiff",
    "error": "Basso.aiff",
    "default": "Glass.aiff",
}


def normalize_sound_type(value: Optional[str]) -> str:
    """Map anything outside SOUND_TYPES to the default sound."""
    return value if value in SOUND_TYPES else DEFAULT_SOUND
