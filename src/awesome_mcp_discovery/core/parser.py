"""Markdown catalog parser.

Turns the awesome-mcp-servers README into ``Entry`` records. The README is a
loosely structured document, so parsing is a line scan with a small amount of
state (current category, whether we are inside the server listing) threaded
through ``reduce_line``. Parsing is total: any string yields a list, possibly
empty, and lines that don't fit are skipped.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

from .models import Entry, HostingType, Platform, TagKind

logger = logging.getLogger(__name__)

# ### 🗄️ <a name="databases"></a>Databases
CATEGORY_HEADING = re.compile(r"^### .+</a>(.+)$")
# - [name](link) - description
ENTRY_LINE = re.compile(r"- (.+?) - (.+)")
MARKDOWN_LINK = re.compile(r"\[(.+?)\]\((.+?)\)")
WHITESPACE = re.compile(r"\s+")

# Level-2 headings containing one of these words close the server listing.
# Upstream vocabulary: anything else after the listing (new "##" sections
# with other titles) is still scanned as part of the last category.
SECTION_STOP_WORDS = ("Frameworks", "Tips")

VARIATION_SELECTOR = "\ufe0f"


class Marker(NamedTuple):
    symbol: str
    kind: TagKind
    value: object
    pattern: re.Pattern


def _marker(symbol: str, kind: TagKind, value: object) -> Marker:
    """Build a marker whose pattern tolerates missing or extra U+FE0F selectors."""
    base = symbol.replace(VARIATION_SELECTOR, "")
    optional_vs = re.escape(VARIATION_SELECTOR) + "?"
    pattern = optional_vs.join(re.escape(ch) for ch in base) + optional_vs
    return Marker(symbol, kind, value, re.compile(pattern))


MARKERS: tuple[Marker, ...] = (
    _marker("🐍", TagKind.LANGUAGE, "Python"),
    _marker("📇", TagKind.LANGUAGE, "TypeScript/JavaScript"),
    _marker("🏎️", TagKind.LANGUAGE, "Go"),
    _marker("🦀", TagKind.LANGUAGE, "Rust"),
    _marker("#️⃣", TagKind.LANGUAGE, "C#"),
    _marker("☕", TagKind.LANGUAGE, "Java"),
    _marker("☁️", TagKind.HOSTING, HostingType.CLOUD),
    _marker("🏠", TagKind.HOSTING, HostingType.LOCAL),
    _marker("🍎", TagKind.PLATFORM, Platform.MACOS),
    _marker("🪟", TagKind.PLATFORM, Platform.WINDOWS),
    _marker("🐧", TagKind.PLATFORM, Platform.LINUX),
    _marker("🎖️", TagKind.OFFICIAL, True),
)

ANY_MARKER = re.compile("|".join(m.pattern.pattern for m in MARKERS))


class ParseState(NamedTuple):
    """Scan state carried from one line to the next."""

    category: str = ""
    in_section: bool = False


class DetectedTags(NamedTuple):
    languages: list[str]
    hosting_types: list[HostingType]
    platforms: list[Platform]
    official: bool


def detect_markers(description: str) -> DetectedTags:
    """Collect the tags for every marker symbol present in ``description``."""
    found: dict[TagKind, list] = {kind: [] for kind in TagKind}
    for marker in MARKERS:
        if marker.pattern.search(description) and marker.value not in found[marker.kind]:
            found[marker.kind].append(marker.value)
    return DetectedTags(
        languages=found[TagKind.LANGUAGE],
        hosting_types=found[TagKind.HOSTING],
        platforms=found[TagKind.PLATFORM],
        official=bool(found[TagKind.OFFICIAL]),
    )


def clean_description(description: str) -> str:
    """Strip marker symbols and collapse whitespace."""
    without_markers = ANY_MARKER.sub("", description)
    return WHITESPACE.sub(" ", without_markers).strip()


def parse_entry_line(line: str, category: str) -> Optional[Entry]:
    """Parse a ``- [name](link) - description`` list item, or return None."""
    if not line.startswith("- ") or "[" not in line or "](" not in line:
        return None

    match = ENTRY_LINE.match(line)
    if not match:
        return None
    name_and_link, raw_description = match.groups()

    link_match = MARKDOWN_LINK.search(name_and_link)
    if not link_match:
        return None
    name, link = link_match.groups()

    tags = detect_markers(raw_description)
    return Entry(
        name=name,
        description=clean_description(raw_description),
        languages=tags.languages,
        hosting_types=tags.hosting_types,
        platforms=tags.platforms,
        official=tags.official,
        category=category,
        link=link,
    )


def reduce_line(state: ParseState, line: str) -> tuple[ParseState, Optional[Entry]]:
    """Advance the scan by one line, returning the new state and any entry."""
    if line.startswith("### ") and "</a>" in line:
        heading = CATEGORY_HEADING.match(line)
        if heading:
            return ParseState(category=heading.group(1).strip(), in_section=True), None
        return state, None

    if line.startswith("## ") and any(word in line for word in SECTION_STOP_WORDS):
        return state._replace(in_section=False), None

    if state.in_section:
        return state, parse_entry_line(line, state.category)

    return state, None


def parse_catalog(text: str) -> list[Entry]:
    """Parse the full README into entries, in document order."""
    state = ParseState()
    entries: list[Entry] = []
    for line in text.splitlines():
        state, entry = reduce_line(state, line)
        if entry is not None:
            entries.append(entry)

    logger.debug("Parsed %d catalog entries from %d characters", len(entries), len(text))
    return entries
