"""Core catalog logic — client, parser, ranker, models, and rendering.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework. The FastMCP server in ``awesome_mcp_discovery.server``
is a thin adapter over it.
"""
