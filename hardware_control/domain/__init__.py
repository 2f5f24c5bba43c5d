"""Domain layer — pure Python, no framework dependencies."""

from hardware_control.domain.errors import CommandTimeout, ExecutionError, UnsupportedOperation
from hardware_control.domain.messages import FAILURE_MARKER, WARNING_MARKER, is_failure, is_warning
from hardware_control.domain.models import (
    ActionOutcome,
    ActionRequest,
    ExternalCommand,
    GetBrightness,
    OpenApp,
    Platform,
    PlaySound,
    SetBrightness,
    clamp_level,
)
from hardware_control.domain.platform import detect, parse_platform
from hardware_control.domain.sounds import SOUND_TYPES, normalize_sound_type

__all__ = [
    "ActionOutcome",
    "ActionRequest",
    "CommandTimeout",
    "ExecutionError",
    "ExternalCommand",
    "FAILURE_MARKER",
    "GetBrightness",
    "OpenApp",
    "Platform",
    "PlaySound",
    "SOUND_TYPES",
    "SetBrightness",
    "UnsupportedOperation",
    "WARNING_MARKER",
    "clamp_level",
    "detect",
    "is_failure",
    "is_warning",
    "normalize_sound_type",
    "parse_platform",
]
