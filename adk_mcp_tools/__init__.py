"""MCP tool packages for the ADK weather tooling."""
