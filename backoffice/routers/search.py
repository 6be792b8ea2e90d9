from typing import Optional

from fastapi import APIRouter, Depends, Query

from backoffice.core.deps import get_search_service
from backoffice.schemas.search import SearchResult
from backoffice.services.search import SearchService

router = APIRouter()


@router.get("/search", response_model=SearchResult, response_model_exclude_none=True)
async def search(
    q: Optional[str] = Query(default=None, description="Text to look for"),
    collection: Optional[str] = Query(
        default=None, description="Restrict the search to one collection"
    ),
    service: SearchService = Depends(get_search_service),
):
    """Search every collection (or just ``collection``) for ``q``, 10 matches each."""
    return await service.search(q, collection)
