"""
MCP Feedback Elicitation

A single-tool Model Context Protocol server that collects human feedback
on an agent's work through MCP elicitation.

Packages:
  - models: sessions, elicitation outcomes and feedback results
  - utils: schema building, response classification, validation
  - mcp_server: FastMCP server, orchestrator and session registry
"""

__version__ = "1.1.13"
