"""Allow ``python -m hardware_control.server``."""

from hardware_control.server.mcp_server import main

main()
