"""User-facing result texts.

Callers only receive text, so failures and warnings start with a fixed
marker that clients can test for.
"""

FAILURE_MARKER = "❌"
WARNING_MARKER = "⚠️"

BRIGHTNESS_UNSUPPORTED = (
    f"{WARNING_MARKER} Reading brightness is not supported on Linux (use xrandr manually)"
)


def brightness_set(level: int) -> str:
    return f"✅ Brightness set to {level}%"


def brightness_current(level: int) -> str:
    return f"💡 Current brightness: {level}%"


def sound_played(sound_type: str) -> str:
    return f"🔔 Sound '{sound_type}' played"


def app_opened(app_name: str) -> str:
    return f"🚀 Application '{app_name}' opened"


def failure(action: str, cause) -> str:
    return f"{FAILURE_MARKER} Error {action}: {cause}"


def is_failure(text: str) -> bool:
    return text.startswith(FAILURE_MARKER)


def is_warning(text: str) -> bool:
    return text.startswith(WARNING_MARKER)
