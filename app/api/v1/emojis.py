"""Emoji catalog lookup and search endpoints."""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_catalog
from app.core.exceptions import NotFoundError
from app.schemas.interpret import EmojiLookupRead, EmojiSearchRead
from app.services.interpreter import DEFAULT_SEARCH_LIMIT, EmojiCatalog

router = APIRouter(prefix="/emojis", tags=["emojis"])


@router.get("/search", response_model=EmojiSearchRead, response_model_exclude_none=True)
async def search_emojis(
    q: str = "",
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1),
    catalog: EmojiCatalog = Depends(get_catalog),
) -> dict[str, list[dict]]:
    """Search the catalog by name, character, category, tldr or slug.

    An empty query lists the first entries. Limits above 20 are capped.
    """
    return {"emojis": [emoji.model_dump() for emoji in catalog.search(q, limit)]}


@router.get("/lookup", response_model=EmojiLookupRead)
async def lookup_emoji(
    character: str = Query(..., min_length=1),
    catalog: EmojiCatalog = Depends(get_catalog),
) -> dict[str, str]:
    """Resolve an emoji character to its catalog slug."""
    slug = catalog.lookup_slug(character)
    if slug is None:
        raise NotFoundError("Emoji")
    return {"character": character, "slug": slug}
