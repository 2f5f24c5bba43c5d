"""MCP tools for display brightness, notification sounds and app launching."""

from typing import Annotated, Literal, Optional

from pydantic import Field

from hardware_control.domain.models import GetBrightness, OpenApp, PlaySound, SetBrightness
from hardware_control.server.mcp_server import mcp
from hardware_control.server.state import get_state

SoundType = Literal["beep", "alert", "success", "error", "default"]


@mcp.tool(title="Set Brightness")
async def set_brightness(
    level: Annotated[
        int,
        Field(ge=0, le=100, description="Brightness level (0-100). 0=minimum, 100=maximum"),
    ],
) -> str:
    """Set the screen brightness. Useful for presentations or working at night."""
    outcome = await get_state().dispatcher.dispatch(SetBrightness(level))
    return outcome.message


@mcp.tool(title="Get Brightness")
async def get_brightness() -> str:
    """Get the current screen brightness level."""
    outcome = await get_state().dispatcher.dispatch(GetBrightness())
    return outcome.message


@mcp.tool(title="Play Sound")
async def play_sound(
    sound_type: Annotated[
        Optional[SoundType],
        Field(description="Type of sound to play"),
    ] = "default",
) -> str:
    """Play a system sound to notify the user."""
    outcome = await get_state().dispatcher.dispatch(PlaySound(sound_type))
    return outcome.message


@mcp.tool(title="Open Application")
async def open_app(
    app_name: Annotated[
        str,
        Field(
            min_length=1,
            description="Application name (e.g. 'Calculator', 'Safari', 'chrome')",
        ),
    ],
) -> str:
    """Open an application. On Windows use the executable name, on macOS the app name."""
    outcome = await get_state().dispatcher.dispatch(OpenApp(app_name))
    return outcome.message
