"""Tests for the README fetch client."""

from __future__ import annotations

import httpx
import pytest
import respx

from awesome_mcp_discovery.core.clients import github
from awesome_mcp_discovery.core.errors import CatalogError, CatalogFetchError


@pytest.mark.asyncio
async def test_fetch_readme_returns_text() -> None:
    with respx.mock(assert_all_called=True) as router:
        router.get(github.DEFAULT_README_URL).mock(return_value=httpx.Response(200, text="# README"))
        assert await github.fetch_readme() == "# README"


@pytest.mark.asyncio
async def test_fetch_readme_uses_configured_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWESOME_MCP_README_URL", "https://mirror.example.com/README.md")
    with respx.mock(assert_all_called=True) as router:
        router.get("https://mirror.example.com/README.md").mock(return_value=httpx.Response(200, text="mirror"))
        assert await github.fetch_readme() == "mirror"


@pytest.mark.asyncio
async def test_fetch_readme_status_error() -> None:
    with respx.mock(assert_all_called=True) as router:
        router.get(github.DEFAULT_README_URL).mock(return_value=httpx.Response(404))
        with pytest.raises(CatalogFetchError) as excinfo:
            await github.fetch_readme()

    assert str(excinfo.value) == "Failed to fetch awesome-mcp-servers README: 404 Not Found"
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_fetch_readme_transport_error() -> None:
    with respx.mock(assert_all_called=True) as router:
        router.get(github.DEFAULT_README_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(CatalogError) as excinfo:
            await github.fetch_readme()

    assert "ConnectError: connection refused" in str(excinfo.value)


def test_timeout_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "5")
    timeout = github.get_timeout()
    assert timeout.read == 5.0
    assert timeout.connect == 5.0


@pytest.mark.asyncio
async def test_fetch_readme_invalid_url() -> None:
    with pytest.raises(CatalogFetchError) as excinfo:
        await github.fetch_readme("https://example.com/\x7fREADME.md")

    assert str(excinfo.value).startswith("Failed to fetch awesome-mcp-servers README: InvalidURL")
    assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)
