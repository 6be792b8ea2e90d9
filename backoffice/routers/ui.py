"""HTML views of the gateway's results for the browser UI.

``/`` serves the page shell; every ``/ui`` route returns a fragment the shell
swaps into place, rendered from the same service calls as the JSON API.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from backoffice.core.deps import (
    get_collection_service,
    get_file_service,
    get_search_service,
)
from backoffice.middlewares.auth import require_auth
from backoffice.renderer.page_renderer import PageRenderer
from backoffice.routers.collections import page_request
from backoffice.schemas.common import PageRequest
from backoffice.services.collection import CollectionService
from backoffice.services.gridfs import FileService
from backoffice.services.search import SearchService

renderer = PageRenderer()

router = APIRouter(dependencies=[Depends(require_auth)])
shell_router = APIRouter()


@shell_router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index():
    return renderer.render_index()


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(service: CollectionService = Depends(get_collection_service)):
    stats = await service.database_stats()
    return renderer.render_dashboard(stats, service.store.bucket_name)


@router.get("/collections/{collection_name}", response_class=HTMLResponse)
async def collection_view(
    collection_name: str,
    request: PageRequest = Depends(page_request),
    service: CollectionService = Depends(get_collection_service),
):
    result = await service.browse(collection_name, request)
    return renderer.render_collection(collection_name, result, request)


@router.get("/collections/{collection_name}/{document_id}", response_class=HTMLResponse)
async def document_view(
    collection_name: str,
    document_id: str,
    service: CollectionService = Depends(get_collection_service),
):
    document = await service.get_document(collection_name, document_id)
    return renderer.render_document(collection_name, document)


@router.get("/search", response_class=HTMLResponse)
async def search_view(
    q: Optional[str] = Query(default=None),
    collection: Optional[str] = Query(default=None),
    service: SearchService = Depends(get_search_service),
):
    return renderer.render_search(await service.search(q, collection))


@router.get("/gridfs", response_class=HTMLResponse)
async def files_view(service: FileService = Depends(get_file_service)):
    files = await service.list_files()
    return renderer.render_files(files, service.store.bucket_name)
