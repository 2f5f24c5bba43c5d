"""MCP server package: FastMCP instance, process state and tool modules."""
