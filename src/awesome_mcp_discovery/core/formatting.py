"""Markdown rendering for tool responses."""

from __future__ import annotations

from typing import Optional

from .models import Entry, RankingResult

LIST_TOOL_NAME = "get-awesome-mcp-servers"


def filter_by_category(entries: list[Entry], category: Optional[str]) -> list[Entry]:
    """Keep entries whose category contains ``category`` (case-insensitive)."""
    if not category:
        return list(entries)
    needle = category.lower()
    return [e for e in entries if needle in e.category.lower()]


def group_by_category(entries: list[Entry]) -> dict[str, list[Entry]]:
    """Group entries by category, in first-seen order."""
    groups: dict[str, list[Entry]] = {}
    for entry in entries:
        groups.setdefault(entry.category, []).append(entry)
    return groups


def _optional_fields(entry: Entry, title_hosting: bool = False) -> list[tuple[str, str]]:
    fields = []
    if entry.languages:
        fields.append(("Languages", ", ".join(entry.languages)))
    if entry.hosting_types:
        hosting = [h.value.capitalize() if title_hosting else h.value for h in entry.hosting_types]
        fields.append(("Hosting", ", ".join(hosting)))
    if entry.platforms:
        fields.append(("Platforms", ", ".join(p.value for p in entry.platforms)))
    if entry.official:
        fields.append(("Official", "yes"))
    return fields


def render_catalog(entries: list[Entry], category: Optional[str] = None) -> str:
    """Render the (optionally category-filtered) catalog grouped by category."""
    filtered = filter_by_category(entries, category)

    if category:
        output = f"# Awesome MCP Servers - {category}\n\n"
        output += f'Found {len(filtered)} servers in category "{category}":\n\n'
    else:
        output = "# Awesome MCP Servers\n\n"
        output += f"Found {len(filtered)} servers:\n\n"

    for cat, cat_entries in group_by_category(filtered).items():
        if cat:
            output += f"## {cat}\n\n"
        for entry in cat_entries:
            output += f"**{entry.name}**\n"
            output += f"- Description: {entry.description}\n"
            for label, value in _optional_fields(entry, title_hosting=True):
                output += f"- {label}: {value}\n"
            output += f"- Link: {entry.link}\n\n"

    return output


def render_no_match(problem: str) -> str:
    return (
        f'No MCP servers found that match the problem: "{problem}"\n\n'
        f"Try using broader terms or check the full list with {LIST_TOOL_NAME}."
    )


def render_recommendations(result: RankingResult) -> str:
    """Render ranked recommendations, or the no-match message."""
    if result.no_match:
        return render_no_match(result.query)

    output = f'# MCP Server Recommendations for: "{result.query}"\n\n'
    output += f"Found {len(result.matches)} relevant servers:\n\n"

    for rank, entry in enumerate(result.matches, start=1):
        output += f"## {rank}. {entry.name} (Score: {entry.relevance_score})\n\n"
        output += f"**Description:** {entry.description}\n\n"
        output += f"**Category:** {entry.category}\n\n"
        for label, value in _optional_fields(entry):
            output += f"**{label}:** {value}\n\n"
        output += f"**Link:** {entry.link}\n\n"
        output += "---\n\n"

    return output
