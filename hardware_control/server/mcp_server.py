"""hardware-control MCP stdio server — FastMCP entrypoint."""

import builtins
import sys

# === stdout protection ===
# MCP JSON-RPC uses stdout exclusively. Override builtins.print to
# always write to stderr so diagnostics never corrupt the protocol.
_original_print = builtins.print


def _safe_print(*args, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    _original_print(*args, **kwargs)


builtins.print = _safe_print

from mcp.server.fastmcp import FastMCP  # noqa: E402

from hardware_control.config import SERVER_NAME  # noqa: E402

# Create MCP server instance
mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Local hardware control: set or read display brightness, play a "
        "notification sound and open applications on the host OS. Results "
        "starting with ❌ are failures; ⚠️ marks unsupported operations."
    ),
)

# Import tool modules to register them with mcp
from hardware_control.server.tools import hardware_tools  # noqa: F401, E402
from hardware_control.server.state import get_state  # noqa: E402


def _banner(state) -> None:
    print(f"Starting {state.config.server_name} MCP server v{state.config.version}")
    print(f"Detected platform: {state.platform.value}")
    print("Available tools:")
    print("  - set_brightness: set display brightness (0-100)")
    print("  - get_brightness: read current display brightness")
    print("  - play_sound: play a system notification sound")
    print("  - open_app: open an application")


def main():
    """Run the MCP server via stdio transport."""
    _banner(get_state())
    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
