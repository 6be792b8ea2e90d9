"""Read-only endpoints over the collections of the administered database."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from backoffice.core.deps import get_collection_service
from backoffice.schemas.collections import CollectionDescriptor, DatabaseStats
from backoffice.schemas.common import PageRequest, PageResult
from backoffice.services.collection import CollectionService

router = APIRouter()


def page_request(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    sortBy: Optional[str] = None,
    sortOrder: Optional[str] = None,
) -> PageRequest:
    return PageRequest.from_query(
        page=page, limit=limit, search=search, sort_by=sortBy, sort_order=sortOrder
    )


@router.get(
    "/collections",
    response_model=List[CollectionDescriptor],
    response_model_exclude_none=True,
)
async def list_collections(
    service: CollectionService = Depends(get_collection_service),
):
    """Every collection with its document count and size metrics."""
    return await service.list_collections()


@router.get("/stats", response_model=DatabaseStats, response_model_exclude_none=True)
async def get_stats(service: CollectionService = Depends(get_collection_service)):
    """Database totals plus the per-collection metrics."""
    return await service.database_stats()


@router.get("/collections/{collection_name}", response_model=PageResult)
async def browse_collection(
    collection_name: str,
    request: PageRequest = Depends(page_request),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.browse(collection_name, request)


@router.get("/collections/{collection_name}/{document_id}")
async def get_document(
    collection_name: str,
    document_id: str,
    service: CollectionService = Depends(get_collection_service),
) -> Dict[str, Any]:
    return await service.get_document(collection_name, document_id)
