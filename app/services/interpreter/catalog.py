"""
Emoji catalog: slug lookup for linking to emoji detail pages, plus search.

The catalog is loaded once at startup and never mutated afterwards, so
concurrent requests can read it without locking.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from app.services.interpreter.types import ExtractedEmoji

logger = logging.getLogger(__name__)


class CatalogEmoji(BaseModel):
    """The fields of an emoji content file used for linking and search."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    character: str
    slug: str
    name: str
    category: str | None = None
    tldr: str | None = None


DEFAULT_SEARCH_LIMIT = 8
MAX_SEARCH_LIMIT = 20


class EmojiCatalog:
    """Immutable collection of catalog emojis, indexed by character."""

    def __init__(self, entries: Iterable[CatalogEmoji] = ()) -> None:
        by_character: dict[str, CatalogEmoji] = {}
        for entry in entries:
            kept = by_character.get(entry.character)
            if kept is not None:
                logger.warning(
                    f"Duplicate catalog character {entry.character!r}: "
                    f"keeping {kept.slug}, ignoring {entry.slug}"
                )
                continue
            by_character[entry.character] = entry
        self._entries: tuple[CatalogEmoji, ...] = tuple(by_character.values())
        self._by_character: Mapping[str, CatalogEmoji] = MappingProxyType(by_character)

    @classmethod
    def from_directory(cls, directory: Path) -> "EmojiCatalog":
        """
        Load every `*.json` emoji file in a directory.

        A missing directory yields an empty catalog so the interpreter still
        works, just without detail-page links.

        Raises:
            pydantic.ValidationError: If a file lacks character/slug/name
            json.JSONDecodeError: If a file is not valid JSON
        """
        if not directory.is_dir():
            logger.warning(f"Emoji data directory {directory} not found, catalog is empty")
            return cls()

        entries = []
        for path in sorted(directory.glob("*.json")):
            data = json.loads(path.read_text(encoding="utf-8"))
            entries.append(CatalogEmoji.model_validate(data))

        catalog = cls(entries)
        logger.info(f"Loaded {len(catalog)} emojis from {directory}")
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._by_character

    def lookup_slug(self, character: str) -> str | None:
        """Exact-match lookup; unknown characters return None."""
        entry = self._by_character.get(character)
        return entry.slug if entry is not None else None

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[CatalogEmoji]:
        """
        Find emojis whose name, character, category, tldr or slug contains the query.

        Matching is case-insensitive and results keep catalog order. An empty
        query returns the first entries. `limit` is capped at MAX_SEARCH_LIMIT.
        """
        limit = min(limit, MAX_SEARCH_LIMIT)
        if limit <= 0:
            return []
        needle = query.lower()
        if not needle:
            return list(self._entries[:limit])

        matches = []
        for entry in self._entries:
            fields = (entry.name, entry.character, entry.category, entry.tldr, entry.slug)
            if any(needle in text.lower() for text in fields if text):
                matches.append(entry)
                if len(matches) == limit:
                    break
        return matches

    def build_slug_map(self, extracted: Iterable[ExtractedEmoji]) -> dict[str, str]:
        """Map each distinct extracted character to its slug, skipping unknowns."""
        slug_map: dict[str, str] = {}
        seen: set[str] = set()

        for emoji in extracted:
            if emoji.character in seen:
                continue
            seen.add(emoji.character)

            slug = self.lookup_slug(emoji.character)
            if slug is not None:
                slug_map[emoji.character] = slug

        return slug_map
