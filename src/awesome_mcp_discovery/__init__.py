"""Awesome MCP Servers discovery server.

Browse the curated awesome-mcp-servers catalog and get lexical
recommendations for a problem, from any MCP client.
"""

__version__ = "0.1.0"
