"""Pydantic data models — the shared catalog objects.

The parser produces these, the ranker scores them, and the formatter renders
them. Nothing here is persisted; every model lives for a single tool call.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TagKind(str, Enum):
    """What a marker symbol tells us about an entry."""

    LANGUAGE = "language"
    HOSTING = "hosting"
    PLATFORM = "platform"
    OFFICIAL = "official"


class HostingType(str, Enum):
    """Where a server runs."""

    CLOUD = "cloud"
    LOCAL = "local"


class Platform(str, Enum):
    """Operating systems a server supports."""

    MACOS = "macOS"
    WINDOWS = "Windows"
    LINUX = "Linux"


class HostingPreference(str, Enum):
    """Hosting filter accepted by the recommendation tool."""

    CLOUD = "cloud"
    LOCAL = "local"
    ANY = "any"


class Entry(BaseModel):
    """One cataloged MCP server."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name from the Markdown link label")
    description: str = Field(description="Description with marker symbols removed")
    languages: list[str] = Field(default_factory=list)
    hosting_types: list[HostingType] = Field(
        default_factory=list,
        description="Empty means unspecified, not 'neither'",
    )
    platforms: list[Platform] = Field(default_factory=list)
    official: bool = False
    category: str = Field("", description="Nearest preceding section heading")
    link: str
    relevance_score: Optional[int] = Field(None, description="Set only on ranked copies")

    def with_score(self, score: int) -> Entry:
        return self.model_copy(update={"relevance_score": score})


class RankingResult(BaseModel):
    """Outcome of ranking a catalog against a problem statement."""

    query: str
    matches: list[Entry] = Field(default_factory=list)
    considered: int = Field(0, description="Entries scored after the hosting filter")

    @property
    def no_match(self) -> bool:
        return not self.matches
