"""Awesome MCP Servers discovery server.

FastMCP server with 2 tools: list the curated catalog and recommend servers
for a problem statement.
Run: awesome-mcp-servers
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations
from pydantic import Field

from . import __version__
from .core.clients import github
from .core.errors import CatalogError
from .core.formatting import render_catalog, render_recommendations
from .core.models import HostingPreference
from .core.parser import parse_catalog
from .core.ranking import DEFAULT_MAX_RESULTS, rank_entries

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)


def _configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging; the catalog is fetched per call, so there is nothing else to set up."""
    _configure_logging()
    logger.info("Awesome MCP Servers Discovery Server v%s running (catalog: %s)", __version__, github.get_readme_url())
    try:
        yield
    finally:
        logger.info("Awesome MCP Servers Discovery Server stopped")


mcp = FastMCP(
    "awesome-mcp-servers",
    instructions="Browse the curated awesome-mcp-servers list and get MCP server recommendations for a problem, filtered by language and hosting preference.",
    lifespan=lifespan,
)


# ─── Tool 1: Catalog ─────────────────────────────────────────────────────────


@mcp.tool(
    name="get-awesome-mcp-servers",
    description="Fetch and parse the awesome MCP servers list from the curated repository",
    annotations=READ_ONLY,
)
async def get_awesome_mcp_servers(
    category: Annotated[
        Optional[str],
        Field(description="Filter by category (e.g., 'AI & Machine Learning', 'Development', 'Files')"),
    ] = None,
) -> str:
    """List cataloged servers grouped by category.

    Args:
        category: Case-insensitive substring of the category name. Omit for the full list.
    """
    try:
        content = await github.fetch_readme()
    except CatalogError as exc:
        raise ToolError(f"Error fetching awesome MCP servers: {exc}") from exc

    entries = parse_catalog(content)
    return render_catalog(entries, category)


# ─── Tool 2: Recommendations ─────────────────────────────────────────────────


@mcp.tool(
    name="recommend-mcp-servers",
    description="Analyze a problem and recommend relevant MCP servers from the awesome list",
    annotations=READ_ONLY,
)
async def recommend_mcp_servers(
    problem: Annotated[str, Field(description="Description of the problem or use case you need help with")],
    max_results: Annotated[int, Field(ge=1, description="Maximum number of recommendations to return")] = DEFAULT_MAX_RESULTS,
    language: Annotated[
        Optional[str],
        Field(description="Preferred programming language (Python, TypeScript, Go, Rust, etc.)"),
    ] = None,
    hosting: Annotated[HostingPreference, Field(description="Hosting preference")] = HostingPreference.ANY,
) -> str:
    """Rank cataloged servers by lexical relevance to a problem statement.

    Args:
        problem: Free-text description of what you need.
        max_results: Maximum number of recommendations. Default 5.
        language: Preferred implementation language, matched as a substring.
        hosting: 'cloud', 'local', or 'any'. Servers with no hosting marker always pass.
    """
    try:
        content = await github.fetch_readme()
    except CatalogError as exc:
        raise ToolError(f"Error recommending MCP servers: {exc}") from exc

    entries = parse_catalog(content)
    result = rank_entries(entries, problem, max_results=max_results, language=language, hosting=hosting)
    return render_recommendations(result)


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
