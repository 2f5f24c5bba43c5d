"""Domain data models — pure Python dataclasses."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from hardware_control.domain.sounds import normalize_sound_type

MIN_LEVEL = 0
MAX_LEVEL = 100


class Platform(str, Enum):
    """OS family the server is running on."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    WSL = "wsl"  # Linux kernel hosted by Windows


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


@dataclass
class SetBrightness:
    level: int

    def __post_init__(self):
        self.level = clamp_level(self.level)

    @property
    def fraction(self) -> float:
        return self.level / 100


@dataclass
class GetBrightness:
    pass


@dataclass
class PlaySound:
    sound_type: str = "default"

    def __post_init__(self):
        self.sound_type = normalize_sound_type(self.sound_type)


@dataclass
class OpenApp:
    app_name: str


ActionRequest = Union[SetBrightness, GetBrightness, PlaySound, OpenApp]


@dataclass(frozen=True)
class ExternalCommand:
    """One program invocation. Built per call, never reused."""

    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)
    capture_output: bool = False
    wait_for_exit: bool = True

    @classmethod
    def shell(cls, line: str, **kwargs) -> "ExternalCommand":
        """Command line that needs a POSIX shell (pipes, job control, user-typed args)."""
        return cls("sh", ("-c", line), **kwargs)

    def argv(self) -> list:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv())


@dataclass
class ActionOutcome:
    """Result of one action. ``message`` is what the caller sees."""

    ok: bool
    message: str
    warning: bool = False

    @classmethod
    def success(cls, message: str) -> "ActionOutcome":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "ActionOutcome":
        return cls(ok=False, message=message)

    @classmethod
    def unsupported(cls, message: str) -> "ActionOutcome":
        return cls(ok=True, message=message, warning=True)
