"""GitHub raw-content client for the awesome-mcp-servers README.

No authentication required. The document is fetched fresh on every call;
nothing is cached.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import httpx

from ..errors import CatalogFetchError

logger = logging.getLogger(__name__)

GITHUB_RAW_BASE = "https://raw.githubusercontent.com"
DEFAULT_README_URL = f"{GITHUB_RAW_BASE}/punkpeye/awesome-mcp-servers/main/README.md"
DEFAULT_TIMEOUT_SECONDS = 30.0
CONNECT_TIMEOUT_SECONDS = 10.0


def get_readme_url() -> str:
    return os.environ.get("AWESOME_MCP_README_URL", "") or DEFAULT_README_URL


def get_timeout() -> httpx.Timeout:
    total = float(os.environ.get("FETCH_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
    return httpx.Timeout(total, connect=min(CONNECT_TIMEOUT_SECONDS, total))


async def fetch_readme(url: Optional[str] = None) -> str:
    """Fetch the raw catalog README.

    Raises CatalogFetchError on a non-success status or any transport error.
    """
    url = url or get_readme_url()

    try:
        async with httpx.AsyncClient(timeout=get_timeout(), follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        reason = exc.response.reason_phrase
        logger.error("Error fetching awesome-mcp-servers README from %s: %s %s", url, status, reason)
        raise CatalogFetchError(
            f"Failed to fetch awesome-mcp-servers README: {status} {reason}"
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("Error fetching awesome-mcp-servers README from %s: %s", url, exc)
        raise CatalogFetchError(
            f"Failed to fetch awesome-mcp-servers README: {exc.__class__.__name__}: {exc}"
        ) from exc

    logger.info("Fetched awesome-mcp-servers README (%d bytes)", len(response.content))
    return response.text
